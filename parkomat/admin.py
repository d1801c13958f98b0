"""The administrator's panel."""

from __future__ import annotations

from typing import List, Optional

from parkomat.console import Console
from parkomat.system import ParkingError, ParkingSystem

PASSWORD = "password"


def _yes_no(flag: bool) -> str:
    return "tak" if flag else "nie"


class Administrator:
    """Inspects the car park, changes the rate and manages subscribers."""

    def __init__(
        self,
        system: ParkingSystem,
        console: Optional[Console] = None,
        password: str = PASSWORD,
    ):
        self.system = system
        self.console = console if console is not None else Console()
        self._password = password

    def login(self) -> bool:
        """Ask for the password and report whether it matched."""
        self.console.write("Podaj haslo admina: ")
        return self.console.read_token() == self._password

    def run_panel(self) -> None:
        """Log in and serve the administrator menu until the user leaves it."""
        if not self.login():
            self.console.write("Nieudane logowanie.\n")
            return
        choice = 0
        while choice != 7:
            self.console.write(
                "\nPanel Administratora:\n1. Pokaz zajete miejsca\n2. Pokaz wolne miejsca\n"
                "3. Pokaz historie biletow\n4. Zmien stawke\n5. Dodaj abonenta\n"
                "6. Usun abonenta\n7. Wyjdz\nWybor: "
            )
            try:
                choice = self.console.read_int()
            except ValueError:
                choice = 0
                self.console.write("Niepoprawny wybor.\n")
                continue
            try:
                self._dispatch(choice)
            except ParkingError as exc:
                self.console.write(f"{exc}\n")

    def _dispatch(self, choice: int) -> None:
        if choice == 1:
            self.show_occupied()
        elif choice == 2:
            self.show_free()
        elif choice == 3:
            self.show_history()
        elif choice == 4:
            self.change_rate()
        elif choice == 5:
            self.console.write("Podaj numer rejestracyjny abonenta: ")
            self.add_subscriber(self.console.read_token())
        elif choice == 6:
            self.console.write("Podaj numer rejestracyjny abonenta do usuniecia: ")
            self.remove_subscriber(self.console.read_token())
        elif choice == 7:
            self.console.write("Wylogowano.\n")
        else:
            self.console.write("Nieznana opcja.\n")

    def show_occupied(self) -> None:
        lines = ["[Admin] Zajete miejsca:\n"]
        lines.extend(f" - Miejsce: {s.id}\n" for s in self.system.spots if s.occupied)
        self.console.write("".join(lines))

    def show_free(self) -> None:
        self.console.write(f"[Admin] Wolne miejsca: {self.system.free_spot_count()}\n")

    def show_history(self) -> None:
        lines = ["[Admin] Historia biletow:\n"]
        lines.extend(
            f"Bilet ID: {t.id}, Nr rej: {t.plate}, Miejsce: {t.spot_id}, "
            f"Wjazd: {t.entry_time.strftime('%H:%M')}, Wyjazd: {t.departure_clock}, "
            f"Oplacony: {_yes_no(t.paid)}, Wyjechal: {_yes_no(t.left)}\n"
            for t in self.system.tickets
        )
        self.console.write("".join(lines))

    def change_rate(self) -> None:
        """Ask for a new positive hourly rate and apply it."""
        self.console.write(
            f"Podaj nowa stawke za godzine (obecna: {self.system.rate:g}): "
        )
        try:
            rate = self.console.read_float()
        except ValueError:
            rate = None
        if rate is not None and rate > 0:
            self.system.rate = rate
            self.console.write(f"Stawka zmieniona na {rate:g}\n")
        else:
            self.console.write("Niepoprawna wartosc.\n")

    def add_subscriber(self, plate: str) -> List[int]:
        """Register a subscriber; their tickets still in use become paid.

        Returns the ids of the updated tickets. Raises ParkingError if the
        plate is already a subscriber.
        """
        if plate in self.system.subscribers:
            raise ParkingError("Ten numer jest juz abonentem.")
        self.system.subscribers.add(plate)
        self.console.write("Dodano abonenta.\n")
        updated = []
        for ticket in self.system.tickets:
            if ticket.plate == plate and not ticket.left:
                ticket.subscription = True
                ticket.paid = True
                ticket.may_leave = True
                updated.append(ticket.id)
                self.console.write(
                    f"Zaktualizowano bilet ID {ticket.id} jako abonamentowy (oplacony).\n"
                )
        return updated

    def remove_subscriber(self, plate: str) -> List[int]:
        """Drop a subscriber; their tickets still in use must be paid again.

        Returns the ids of the updated tickets. Raises ParkingError if the
        plate is not a subscriber.
        """
        if plate not in self.system.subscribers:
            raise ParkingError("Nie znaleziono abonenta.")
        self.system.subscribers.discard(plate)
        self.console.write("Usunieto abonenta.\n")
        updated = []
        for ticket in self.system.tickets:
            if ticket.plate == plate and not ticket.left:
                ticket.subscription = False
                ticket.paid = False
                ticket.may_leave = False
                updated.append(ticket.id)
                self.console.write(f"Bilet ID {ticket.id} wymaga teraz oplacenia.\n")
        return updated