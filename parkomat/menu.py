"""The interactive main menu and the command entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from parkomat.admin import Administrator
from parkomat.console import Console
from parkomat.driver import Driver
from parkomat.system import ParkingError, ParkingSystem

DEFAULT_SPOTS = 10
DEFAULT_RATE = 5.0

_MENU = (
    "\n--- System Parkingowy ---\n"
    "1. Wjazd pojazdu\n2. Wyjazd pojazdu\n3. Platnosc\n4. Panel administratora\n"
    "5. Stan parkingu\n6. Koniec\nWybor: "
)


def _read_ticket_id(console: Console) -> Optional[int]:
    try:
        return console.read_int()
    except ValueError:
        console.write("Niepoprawne ID biletu.\n")
        return None


def run_menu(system: ParkingSystem, console: Console) -> None:
    """Serve the main menu until the user chooses to quit."""
    driver = Driver(system, console)
    admin = Administrator(system, console)
    choice = 0
    while choice != 6:
        console.write(_MENU)
        try:
            choice = console.read_int()
        except ValueError:
            choice = 0
            console.write("Niepoprawny wybor.\n")
            continue
        try:
            if choice == 1:
                console.write("Podaj numer rejestracyjny pojazdu: ")
                driver.enter(console.read_token())
            elif choice == 2:
                console.write("Podaj ID biletu: ")
                ticket_id = _read_ticket_id(console)
                if ticket_id is not None:
                    driver.leave(ticket_id)
            elif choice == 3:
                console.write("Podaj ID biletu do platnosci: ")
                ticket_id = _read_ticket_id(console)
                if ticket_id is not None:
                    driver.pay(ticket_id)
            elif choice == 4:
                admin.run_panel()
            elif choice == 5:
                console.write(system.describe())
            elif choice == 6:
                console.write("Koniec programu.\n")
            else:
                console.write("Nieznana opcja.\n")
        except ParkingError as exc:
            console.write(f"{exc}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive car park with its default size and rate."""
    parser = argparse.ArgumentParser(prog="parkomat", description="Interactive car park.")
    parser.parse_args(argv)
    system = ParkingSystem(DEFAULT_SPOTS, DEFAULT_RATE)
    try:
        run_menu(system, Console())
    except EOFError:
        pass
    return 0