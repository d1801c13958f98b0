"""Driver actions: entering, paying for and leaving the car park."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta
from typing import Optional, Tuple

from parkomat.console import Console
from parkomat.models import Ticket
from parkomat.system import ParkingError, ParkingSystem, validate_plate

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_LIMIT = 2**31

BAD_CLOCK_FORMAT = "Niepoprawny format czasu."
BAD_CLOCK_VALUE = "Niepoprawna godzina."


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(BAD_CLOCK_FORMAT)
    value = int(match.group(1))
    if not -_INT_LIMIT <= value < _INT_LIMIT:
        raise ValueError(BAD_CLOCK_FORMAT)
    return value


def parse_clock(text: str) -> Tuple[int, int]:
    """Parse an "HH:MM" clock reading into (hour, minute).

    Raises ValueError for a malformed reading or one outside 00:00-23:59.
    """
    hours_part, sep, minutes_part = text.partition(":")
    if not sep:
        raise ValueError(BAD_CLOCK_FORMAT)
    hour = _leading_int(hours_part)
    minute = _leading_int(minutes_part)
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(BAD_CLOCK_VALUE)
    return hour, minute


def departure_time(entry: datetime, hour: int, minute: int) -> datetime:
    """Return the first moment at the given clock time not before the entry time."""
    departure = entry.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if departure < entry:
        departure += timedelta(days=1)
    return departure


def parking_fee(entry: datetime, departure: datetime, rate: float) -> Tuple[int, float]:
    """Return (started hours, amount); at least one hour is always charged."""
    seconds = (departure - entry).total_seconds()
    hours = math.ceil(seconds / 3600.0)
    if hours <= 0:
        hours = 1
    return hours, hours * rate


def _num(value: float) -> str:
    return f"{value:g}"


class Driver:
    """Carries out what a driver does at the gate and at the pay station."""

    def __init__(self, system: ParkingSystem, console: Optional[Console] = None):
        self.system = system
        self.console = console if console is not None else Console()

    def _ticket(self, ticket_id: int) -> Ticket:
        ticket = self.system.find_ticket(ticket_id)
        if ticket is None:
            raise ParkingError("[Kierowca] Bilet nie znaleziony.")
        return ticket

    def enter(self, plate: str) -> int:
        """Admit a vehicle and return the id of its new ticket.

        Raises ParkingError for a bad plate, a full car park or a vehicle already inside.
        """
        if not validate_plate(plate):
            raise ParkingError(
                "[Kierowca] Niepoprawny numer rejestracyjny "
                "(tylko duze litery i cyfry, max 10 znakow)."
            )
        spot_id = self.system.find_free_spot()
        if spot_id is None:
            raise ParkingError("[Kierowca] Brak wolnych miejsc!")
        if self.system.find_active_ticket(plate) is not None:
            raise ParkingError("[Kierowca] Pojazd z takim numerem juz jest na parkingu.")

        self.system.mark_spot(spot_id, True)
        ticket = Ticket(self.system.next_ticket_id, plate, spot_id, self.system.rate)
        self.system.next_ticket_id += 1
        if plate in self.system.subscribers:
            ticket.subscription = True
            ticket.paid = True
            ticket.may_leave = True
        self.system.add_ticket(ticket)
        self.console.write(
            f"[Kierowca] Wjazd zatwierdzony. Bilet ID: {ticket.id}, miejsce: {spot_id}\n"
        )
        return ticket.id

    def leave(self, ticket_id: int) -> None:
        """Let the vehicle out and free its spot.

        Raises ParkingError when the ticket is unknown, used or unpaid.
        """
        ticket = self._ticket(ticket_id)
        if ticket.left:
            raise ParkingError("[Kierowca] Ten pojazd juz wyjechal z parkingu.")
        if not ticket.paid and not ticket.subscription:
            raise ParkingError("[Kierowca] Prosze oplacic bilet przed wyjazdem!")
        if not ticket.may_leave and not ticket.subscription:
            raise ParkingError(
                "[Kierowca] Minelo wiecej niz 10 minut od platnosci. Wyjazd niedozwolony."
            )
        self.system.mark_spot(ticket.spot_id, False)
        ticket.left = True
        self.console.write("[Kierowca] Wyjazd zatwierdzony. Dziekujemy!\n")

    def pay(self, ticket_id: int) -> float:
        """Ask for a departure time and a payment method, then settle the ticket.

        Returns the amount charged (0 for subscribers). Raises ParkingError on
        an unknown or already paid ticket and on invalid answers.
        """
        ticket = self._ticket(ticket_id)
        if ticket.paid:
            raise ParkingError("[Kierowca] Bilet juz oplacony.")
        if ticket.subscription:
            self.console.write("[Kierowca] Abonament - brak oplat.\n")
            ticket.paid = True
            ticket.may_leave = True
            return 0.0

        self.console.write("Podaj symulowana godzine wyjazdu (format HH:MM): ")
        clock = self.console.read_line()
        if not clock:
            clock = self.console.read_line()
        try:
            hour, minute = parse_clock(clock)
        except ValueError as exc:
            raise ParkingError(str(exc)) from exc

        ticket.departure_clock = clock
        departure = departure_time(ticket.entry_time, hour, minute)
        ticket.departure_time = departure
        hours, amount = parking_fee(ticket.entry_time, departure, ticket.rate)

        self.console.write("Wybierz metode platnosci:\n1. Gotowka\n2. Karta\nWybor: ")
        try:
            method = self.console.read_int()
        except ValueError:
            method = 0
        if method not in (1, 2):
            raise ParkingError("Niepoprawna metoda platnosci.")
        if method == 1:
            self.console.write("Platnosc gotowka przyjeta.\n")
        else:
            self.console.write("Platnosc karta przyjeta.\n")

        ticket.paid = True
        ticket.may_leave = True
        self.console.write(
            f"[Kierowca] Bilet ID {ticket_id} zostal oplacony. Czas postoju: {hours}"
            f" godz., kwota: {_num(amount)} zl.\n"
        )
        return amount