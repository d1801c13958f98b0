# parkomat

A small interactive parking lot system for the terminal. It keeps track of
parking spots, issues tickets on entry, charges for each started hour when
a ticket is paid, lets paid vehicles leave, and gives the operator an admin
panel for subscribers and the hourly rate.

The prompts and messages are in Polish.

## Installation

```
pip install .
```

## Running

```
parkomat
```

The command takes no options other than `--help`. The lot starts with 10
spots and a rate of 5.0 zl per hour. The main menu offers:

1. Vehicle entry: give a number plate (capital letters A-Z and digits, 1 to
   10 characters) and get a ticket ID and a spot number. Entry is refused
   when the plate is invalid, the lot is full, or a vehicle with that plate
   is already inside.
2. Vehicle exit: give a ticket ID. The ticket must be paid, unless the
   vehicle belongs to a subscriber.
3. Payment: give a ticket ID, a simulated departure time in `HH:MM` form
   and a payment method (1 for cash, 2 for card). Every started hour is
   charged, with at least one hour. A departure time earlier than the entry
   time counts as the next day. Subscribers' tickets are settled without a
   charge.
4. Admin panel: asks for the admin password, which is `password`. From
   there you can list the occupied spots, show how many spots are free,
   show the ticket history, change the hourly rate (it must be positive),
   and add or remove subscribers. Adding a subscriber marks their tickets
   still in use as paid; removing one makes those tickets payable again.
5. Lot status: shows every spot (`X` occupied, `O` free) and the current
   rate.
6. Quit. The program also ends at the end of input.

## Using it from Python

The pieces the menu uses can be driven directly:

```python
from datetime import datetime, timedelta

from parkomat.system import ParkingSystem, validate_plate
from parkomat.driver import Driver, parse_clock, departure_time, parking_fee

system = ParkingSystem(3, 5.0)
driver = Driver(system)            # prompts and messages go to stdout
ticket_id = driver.enter("TEST1")
print(system.free_spot_count())    # 2

hour, minute = parse_clock("14:30")
entry = datetime(2024, 1, 1, 12, 0)
print(parking_fee(entry, entry + timedelta(minutes=90), 5.0))  # (2, 10.0)
```

- `parkomat.system` holds `ParkingSystem` (spots, tickets, subscribers,
  rate), `validate_plate` and `ParkingError`, which every refused
  operation raises with its message.
- `parkomat.driver.Driver` has `enter`, `pay` and `leave`; `pay` reads its
  answers through a `parkomat.console.Console`.
- `parkomat.admin.Administrator` has the panel and its actions, including
  `add_subscriber(plate)` and `remove_subscriber(plate)`, which return the
  ids of the tickets they changed.
- `parkomat.menu.run_menu(system, console)` runs the main menu on any
  `Console`, which can be built over any pair of text streams.

`ParkingSystem.save_history_csv(path)` appends the ticket history to a
semicolon-separated CSV file. The header row is written only when the file
is new or empty.

## What it does not do

- Nothing is kept between runs: spots, tickets, subscribers and the rate
  live in memory only and are lost on quitting.
- The interactive menu never writes the CSV history; only
  `save_history_csv` called from Python does.
- Departure times are simulated clock readings typed in at payment; there
  is no real-time limit on leaving after paying.

## Tests

```
pip install .[test]
pytest
```