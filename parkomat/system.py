"""The parking system: spots, tickets, subscribers and ticket history."""

from __future__ import annotations

import csv
import os
from typing import List, Optional, Set

from parkomat.models import ParkingSpot, Ticket

MAX_PLATE_LENGTH = 10
_TIME_FORMAT = "%Y-%m-%d %H:%M"
CSV_HEADER = [
    "ID Biletu",
    "Nr rejestracyjny",
    "ID miejsca",
    "Data i godzina wjazdu",
    "Data i godzina wyjazdu",
    "Oplacony",
    "Wyjechal",
]


class ParkingError(Exception):
    """Raised when a parking operation cannot be carried out."""


def validate_plate(plate: str) -> bool:
    """Return True for 1 to 10 characters, each an uppercase ASCII letter or digit."""
    if not plate or len(plate) > MAX_PLATE_LENGTH:
        return False
    return all("A" <= c <= "Z" or "0" <= c <= "9" for c in plate)


def _format_number(value: float) -> str:
    return f"{value:g}"


def _yes_no(flag: bool) -> str:
    return "tak" if flag else "nie"


class ParkingSystem:
    """Holds the spots, the issued tickets, the subscribers and the hourly rate."""

    def __init__(self, spot_count: int, rate: float):
        self.spots: List[ParkingSpot] = [ParkingSpot(i) for i in range(1, spot_count + 1)]
        self.tickets: List[Ticket] = []
        self.subscribers: Set[str] = set()
        self.next_ticket_id = 1
        self.rate = rate

    def find_free_spot(self) -> Optional[int]:
        """Return the id of the first free spot, or None when all are taken."""
        return next((spot.id for spot in self.spots if not spot.occupied), None)

    def mark_spot(self, spot_id: int, occupied: bool) -> None:
        """Set the occupancy of the spot with the given id; unknown ids are ignored."""
        for spot in self.spots:
            if spot.id == spot_id:
                spot.occupied = occupied
                break

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets.append(ticket)

    def find_ticket(self, ticket_id: int) -> Optional[Ticket]:
        return next((t for t in self.tickets if t.id == ticket_id), None)

    def find_active_ticket(self, plate: str) -> Optional[Ticket]:
        """Return the ticket of a vehicle with this plate still on the premises."""
        return next((t for t in self.tickets if t.plate == plate and not t.left), None)

    def free_spot_count(self) -> int:
        return sum(1 for spot in self.spots if not spot.occupied)

    def describe(self) -> str:
        """Return a printable summary of the spots and the current rate."""
        lines = ["Stan parkingu:", "Miejsca (id: zajete):"]
        lines.extend(f" {spot.id}: {'X' if spot.occupied else 'O'}" for spot in self.spots)
        lines.append(f"Aktualna stawka za godzine: {_format_number(self.rate)} zl")
        return "\n".join(lines) + "\n"

    def save_history_csv(self, path: str | os.PathLike) -> None:
        """Append every ticket to a semicolon-separated file, writing a header if it is empty.

        Raises ParkingError when the file cannot be written.
        """
        try:
            needs_header = not os.path.isfile(path) or os.path.getsize(path) == 0
            with open(path, "a", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle, delimiter=";", lineterminator="\n")
                if needs_header:
                    writer.writerow(CSV_HEADER)
                writer.writerows(self._history_row(t) for t in self.tickets)
        except OSError as exc:
            raise ParkingError(
                "Nie mozna otworzyc pliku do zapisu historii biletow."
            ) from exc

    @staticmethod
    def _history_row(ticket: Ticket) -> list:
        departure = (
            ticket.departure_time.strftime(_TIME_FORMAT) if ticket.has_departure else "-"
        )
        return [
            ticket.id,
            ticket.plate,
            ticket.spot_id,
            ticket.entry_time.strftime(_TIME_FORMAT),
            departure,
            _yes_no(ticket.paid),
            _yes_no(ticket.left),
        ]