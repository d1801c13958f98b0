from datetime import datetime

import pytest

from parkomat.models import Ticket
from parkomat.system import CSV_HEADER, ParkingError, ParkingSystem, validate_plate

HEADER_LINE = (
    "ID Biletu;Nr rejestracyjny;ID miejsca;Data i godzina wjazdu;"
    "Data i godzina wyjazdu;Oplacony;Wyjechal"
)


@pytest.mark.parametrize("plate", ["A", "AB123", "ZZZZZZZZZZ", "0000"])
def test_valid_plates(plate):
    assert validate_plate(plate) is True


@pytest.mark.parametrize("plate", ["", "ab123", "AB-12", "ABCDEFGHIJK", "AB 12", "ŁÓD1"])
def test_invalid_plates(plate):
    assert validate_plate(plate) is False


def test_new_system_has_all_spots_free():
    system = ParkingSystem(10, 5.0)
    assert [s.id for s in system.spots] == list(range(1, 11))
    assert system.free_spot_count() == 10
    assert system.find_free_spot() == 1
    assert system.next_ticket_id == 1
    assert system.rate == 5.0


def test_mark_spot_changes_free_spot():
    system = ParkingSystem(3, 5.0)
    system.mark_spot(1, True)
    assert system.find_free_spot() == 2
    assert system.free_spot_count() == 2
    system.mark_spot(1, False)
    assert system.find_free_spot() == 1


def test_mark_unknown_spot_is_ignored():
    system = ParkingSystem(2, 5.0)
    system.mark_spot(99, True)
    assert system.free_spot_count() == 2


def test_full_parking_has_no_free_spot():
    system = ParkingSystem(2, 5.0)
    for spot in system.spots:
        system.mark_spot(spot.id, True)
    assert system.find_free_spot() is None
    assert system.free_spot_count() == 0


def test_find_ticket_by_id():
    system = ParkingSystem(2, 5.0)
    ticket = Ticket(7, "AB1", 1, 5.0)
    system.add_ticket(ticket)
    assert system.find_ticket(7) is ticket
    assert system.find_ticket(8) is None


def test_find_active_ticket_skips_departed():
    system = ParkingSystem(2, 5.0)
    old = Ticket(1, "AB1", 1, 5.0, left=True)
    current = Ticket(2, "AB1", 2, 5.0)
    system.add_ticket(old)
    system.add_ticket(current)
    assert system.find_active_ticket("AB1") is current
    current.left = True
    assert system.find_active_ticket("AB1") is None


def test_describe_lists_spots_and_rate():
    system = ParkingSystem(2, 5.0)
    system.mark_spot(2, True)
    text = system.describe()
    lines = text.splitlines()
    assert lines[0] == "Stan parkingu:"
    assert " 1: O" in lines
    assert " 2: X" in lines
    assert lines[-1] == "Aktualna stawka za godzine: 5 zl"


def test_save_history_without_tickets_writes_only_header(tmp_path):
    path = tmp_path / "historia.csv"
    system = ParkingSystem(1, 5.0)
    system.save_history_csv(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [HEADER_LINE]
    assert lines[0] == ";".join(CSV_HEADER)


def test_save_history_writes_header_once(tmp_path):
    path = tmp_path / "historia.csv"
    system = ParkingSystem(2, 5.0)
    system.add_ticket(Ticket(1, "AB1", 1, 5.0, entry_time=datetime(2024, 5, 1, 8, 30)))
    system.save_history_csv(path)
    system.save_history_csv(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines.count(HEADER_LINE) == 1
    assert lines[0] == HEADER_LINE
    assert lines[1] == lines[2]
    assert len(lines) == 3


def test_save_history_row_contents(tmp_path):
    path = tmp_path / "historia.csv"
    system = ParkingSystem(2, 5.0)
    system.add_ticket(Ticket(1, "AB1", 1, 5.0, entry_time=datetime(2024, 5, 1, 8, 30)))
    system.add_ticket(
        Ticket(
            2,
            "CD2",
            2,
            5.0,
            entry_time=datetime(2024, 5, 1, 9, 15),
            departure_time=datetime(2024, 5, 1, 11, 0),
            departure_clock="11:00",
            paid=True,
            left=True,
        )
    )
    system.save_history_csv(path)
    rows = [line.split(";") for line in path.read_text(encoding="utf-8").splitlines()[1:]]
    assert rows[0] == ["1", "AB1", "1", "2024-05-01 08:30", "-", "nie", "nie"]
    assert rows[1] == ["2", "CD2", "2", "2024-05-01 09:15", "2024-05-01 11:00", "tak", "tak"]


def test_save_history_appends_to_existing_file(tmp_path):
    path = tmp_path / "historia.csv"
    path.write_text("existing\n", encoding="utf-8")
    system = ParkingSystem(1, 5.0)
    system.add_ticket(Ticket(1, "AB1", 1, 5.0))
    system.save_history_csv(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "existing"
    assert HEADER_LINE not in lines
    assert lines[1].startswith("1;AB1;1;")


def test_save_history_to_directory_fails(tmp_path):
    system = ParkingSystem(1, 5.0)
    with pytest.raises(ParkingError):
        system.save_history_csv(tmp_path)