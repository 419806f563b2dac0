# carassembly

A small interactive console program for putting a car together from parts
and checking whether the combination works. Its screens and messages are
in Korean.

## Installing

```
pip install .
```

## Running

```
carassembly
```

The command takes no options apart from `--help`. It reads answers from
standard input and walks through five screens:

1. Car type: SEDAN, SUV, TRUCK
2. Engine: GM, TOYOTA, WIA, BROKEN_ENGINE
3. Brake system: MANDO, CONTINENTAL, BOSCH_B
4. Steering system: BOSCH_S, MOBIS
5. Run or Test the finished car

Type the number of an option at the `INPUT >` prompt. On screens 2 to 4,
`0` goes back one screen. On the last screen, `0` starts over from the
first screen, `1` runs the car and `2` tests the part combination; after
running or testing, the last screen is shown again. Type `exit` to quit
at any time; the session also ends when the input runs out. Anything that
is not a whole number, or is out of range for the current screen, prints
an error and shows the screen again.

## Combination rules

A car fails its test, and will not run, when it is built as:

- a Sedan with Continental brakes
- an SUV with a Toyota engine
- a Truck with a WIA engine
- a Truck with Mando brakes
- Bosch brakes with any steering other than Bosch

Only the first rule that matches is reported. A car with a broken engine
passes the combination test but does not move when run.

## Using it from Python

`carassembly.parts` holds the `Step` enumeration of screens, the part
enumerations (`CarType`, `Engine`, `BrakeSystem`, `SteeringSystem`,
`RunTest`) and the parts lists. `build_catalogs()` returns a `Catalogs`
object holding one `PartCatalog` per kind of part (`car`, `engine`,
`brake`, `steering`). A catalog numbers its entries from 1: `add_type()`
appends a new one, `type_name()` looks one up (raising `IndexError` when
out of range), `total_types()` counts them and `menu_lines()` gives the
numbered menu entries.

`carassembly.producer` holds the `Assembly` record of chosen parts,
`check_assembly()`, which returns the reason a combination is not allowed
or `None`, and `CarAssemblyProducer`, whose `run_produced_car()` and
`test_produced_car()` print their report and return whether the car runs
or passes; `handle_selection()` acts on an answer at the run/test screen
and returns the next `Step`.

`carassembly.view.CarAssembleView` draws each screen with
`display_user_view()`, turns a typed line into an answer with
`validate_input()` (raising `InvalidInputError` or `ExitRequested`) and
records part choices with `handle_selection()`, which returns the next
`Step`.

`carassembly.cli.run_session()` drives a whole session from an iterable of
input lines, writing to a given stream, and returns the final `Assembly`.
Both the producer, the view and the session accept a `delay` callable in
place of `time.sleep`, which makes scripted runs fast:

```python
import io
from carassembly.cli import run_session

out = io.StringIO()
assembly = run_session(["1", "1", "1", "1", "2", "exit"], out, delay=lambda seconds: None)
print(assembly)
```