"""Part kinds, assembly steps and the catalogs of selectable parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

CLEAR_SCREEN = "\033[H\033[2J"
INPUT_DELAY = 0.5
INVALID_INPUT = -1
RETURN_TO_PREVIOUS = 0
RETURN_TO_START = 0


class Step(IntEnum):
    """The questions asked while assembling a car, in order."""

    CAR_TYPE = 0
    ENGINE = 1
    BRAKE_SYSTEM = 2
    STEERING_SYSTEM = 3
    RUN_TEST = 4


class CarType(IntEnum):
    SEDAN = 1
    SUV = 2
    TRUCK = 3


class Engine(IntEnum):
    GM = 1
    TOYOTA = 2
    WIA = 3
    BROKEN_ENGINE = 4


class BrakeSystem(IntEnum):
    MANDO = 1
    CONTINENTAL = 2
    BOSCH_B = 3


class SteeringSystem(IntEnum):
    BOSCH_S = 1
    MOBIS = 2


class RunTest(IntEnum):
    RUN = 1
    TEST = 2


class PartCatalog:
    """An ordered list of part names, selected by 1-based index."""

    def __init__(self, label: str, names: Iterable[str] = ()) -> None:
        self.label = label
        self._names: list[str] = list(names)

    def add_type(self, name: str) -> None:
        """Append a new part name; it gets the next index."""
        self._names.append(name)

    def type_name(self, index: int) -> str:
        """Return the name of the part at the 1-based ``index``."""
        if not 1 <= index <= len(self._names):
            raise IndexError(
                f"{self.label} type {index} is outside 1..{len(self._names)}"
            )
        return self._names[index - 1]

    def total_types(self) -> int:
        """Return how many parts the catalog holds."""
        return len(self._names)

    def menu_lines(self) -> list[str]:
        """Return the numbered menu entries, one per part."""
        return [f"{number}. {name}" for number, name in enumerate(self._names, start=1)]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)


@dataclass
class Catalogs:
    """The four catalogs an assembly chooses from."""

    car: PartCatalog
    engine: PartCatalog
    brake: PartCatalog
    steering: PartCatalog


def build_catalogs() -> Catalogs:
    """Return a fresh set of catalogs filled with the standard parts."""
    return Catalogs(
        car=PartCatalog("Car Type", (member.name for member in CarType)),
        engine=PartCatalog("Engine", (member.name for member in Engine)),
        brake=PartCatalog("Brake System", (member.name for member in BrakeSystem)),
        steering=PartCatalog(
            "Steering System", (member.name for member in SteeringSystem)
        ),
    )