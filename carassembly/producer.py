"""Running and testing an assembled car."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from carassembly.parts import (
    INPUT_DELAY,
    BrakeSystem,
    Catalogs,
    CarType,
    Engine,
    RunTest,
    Step,
    SteeringSystem,
    build_catalogs,
)


@dataclass
class Assembly:
    """The part chosen at each step; 0 means nothing chosen yet."""

    car_type: int = 0
    engine: int = 0
    brake_system: int = 0
    steering_system: int = 0


def check_assembly(assembly: Assembly) -> Optional[str]:
    """Return why the part combination is not allowed, or None if it is."""
    if assembly.car_type == CarType.SEDAN and assembly.brake_system == BrakeSystem.CONTINENTAL:
        return "Sedan에는 Continental제동장치 사용 불가"
    if assembly.car_type == CarType.SUV and assembly.engine == Engine.TOYOTA:
        return "SUV에는 TOYOTA엔진 사용 불가"
    if assembly.car_type == CarType.TRUCK and assembly.engine == Engine.WIA:
        return "Truck에는 WIA엔진 사용 불가"
    if assembly.car_type == CarType.TRUCK and assembly.brake_system == BrakeSystem.MANDO:
        return "Truck에는 Mando제동장치 사용 불가"
    if (
        assembly.brake_system == BrakeSystem.BOSCH_B
        and assembly.steering_system != SteeringSystem.BOSCH_S
    ):
        return "Bosch제동장치에는 Bosch조향장치 이외 사용 불가"
    return None


class CarAssemblyProducer:
    """Runs or tests the car described by an assembly."""

    def __init__(
        self,
        assembly: Assembly,
        catalogs: Optional[Catalogs] = None,
        out: Optional[TextIO] = None,
        delay: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.assembly = assembly
        self.catalogs = catalogs if catalogs is not None else build_catalogs()
        self._out = out
        self._delay = delay if delay is not None else time.sleep

    def _say(self, line: str) -> None:
        print(line, file=self._out if self._out is not None else sys.stdout)

    def _pause(self) -> None:
        self._delay(INPUT_DELAY)

    def run_produced_car(self) -> bool:
        """Print the car's parts and report whether it runs."""
        if check_assembly(self.assembly) is not None:
            self._say("자동차가 동작되지 않습니다")
            return False
        if self.assembly.engine == Engine.BROKEN_ENGINE:
            self._say("엔진이 고장나있습니다.")
            self._say("자동차가 움직이지 않습니다.")
            return False
        chosen = (
            (self.catalogs.car, self.assembly.car_type),
            (self.catalogs.engine, self.assembly.engine),
            (self.catalogs.brake, self.assembly.brake_system),
            (self.catalogs.steering, self.assembly.steering_system),
        )
        for catalog, index in chosen:
            self._say(f"{catalog.label} : {catalog.type_name(index)} ")
        self._say("자동차가 동작됩니다.")
        return True

    def test_produced_car(self) -> bool:
        """Print the combination test result and return whether it passed."""
        reason = check_assembly(self.assembly)
        if reason is not None:
            self._say("자동차 부품 조합 테스트 결과 : FAIL")
            self._say(reason)
            return False
        self._say("자동차 부품 조합 테스트 결과 : PASS")
        return True

    def handle_selection(self, answer: int) -> Step:
        """Act on an answer at the run/test step and return the next step."""
        if answer == 0:
            return Step.CAR_TYPE
        if answer == RunTest.RUN:
            self.run_produced_car()
            self._pause()
        else:
            self._say("Test...")
            self._pause()
            self.test_produced_car()
            self._pause()
        return Step.RUN_TEST