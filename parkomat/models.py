"""Plain records describing parking spots and tickets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

NO_DEPARTURE = "-"


@dataclass
class ParkingSpot:
    """A numbered parking spot that is either free or occupied."""

    id: int
    occupied: bool = False


@dataclass
class Ticket:
    """A ticket issued to a vehicle on entry."""

    id: int
    plate: str
    spot_id: int
    rate: float
    entry_time: datetime = field(default_factory=datetime.now)
    departure_time: Optional[datetime] = None
    departure_clock: str = NO_DEPARTURE
    paid: bool = False
    may_leave: bool = False
    subscription: bool = False
    left: bool = False

    def __post_init__(self) -> None:
        if self.departure_time is None:
            self.departure_time = self.entry_time

    @property
    def has_departure(self) -> bool:
        """True once a simulated departure time has been recorded."""
        return self.departure_clock != NO_DEPARTURE