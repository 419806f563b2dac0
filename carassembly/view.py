"""The question screens and the handling of answers while assembling a car."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, Optional, TextIO

from carassembly.parts import (
    CLEAR_SCREEN,
    INPUT_DELAY,
    RETURN_TO_PREVIOUS,
    RETURN_TO_START,
    Catalogs,
    PartCatalog,
    RunTest,
    Step,
    build_catalogs,
)
from carassembly.producer import Assembly

_SEPARATOR = "==============================="
_NUMBER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")

_CAR_PICTURE = (
    "        ______________",
    "       /|            | ",
    "  ____/_|_____________|____",
    " |                      O  |",
    " '-(@)----------------(@)--'",
)


class InvalidInputError(ValueError):
    """An answer that is not a number or is outside the allowed range."""


class ExitRequested(Exception):
    """The user typed ``exit``."""


def _to_step(step: int) -> Step:
    try:
        return Step(step)
    except ValueError:
        raise ValueError(f"invalid step: {step}") from None


class CarAssembleView:
    """Shows the question for each step and records the chosen parts."""

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

    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _say(self, line: str) -> None:
        print(line, file=self._stream())

    def _pause(self) -> None:
        self._delay(INPUT_DELAY)

    def _show_catalog(self, question: str, catalog: PartCatalog) -> None:
        self._say(question)
        self._say("0. 뒤로가기")
        for line in catalog.menu_lines():
            self._say(line)

    def display_user_view(self, step: int) -> None:
        """Print the screen for ``step``; an unknown step raises ValueError."""
        step = _to_step(step)
        self._stream().write(CLEAR_SCREEN)
        if step is Step.CAR_TYPE:
            for line in _CAR_PICTURE:
                self._say(line)
            self._say(_SEPARATOR)
            self._say("어떤 차량 타입을 선택할까요?")
            for line in self.catalogs.car.menu_lines():
                self._say(line)
        elif step is Step.ENGINE:
            self._show_catalog("어떤 엔진을 탑재할까요?", self.catalogs.engine)
        elif step is Step.BRAKE_SYSTEM:
            self._show_catalog("어떤 제동장치를 선택할까요?", self.catalogs.brake)
        elif step is Step.STEERING_SYSTEM:
            self._show_catalog("어떤 조향장치를 선택할까요?", self.catalogs.steering)
        else:
            self._say("멋진 차량이 완성되었습니다.")
            self._say("어떤 동작을 할까요?")
            self._say("0. 처음 화면으로 돌아가기")
            self._say("1. RUN")
            self._say("2. Test")
        self._say(_SEPARATOR)

    def validate_input(self, step: int, text: str) -> int:
        """Turn a line typed at ``step`` into an answer.

        Raises ExitRequested for ``exit`` and InvalidInputError for anything
        that is not a number in the range the step allows.
        """
        step = _to_step(step)
        answer_text = text.split("\r", 1)[0].split("\n", 1)[0]
        if answer_text == "exit":
            raise ExitRequested()
        if not _NUMBER.fullmatch(answer_text):
            raise InvalidInputError("ERROR :: 숫자만 입력 가능")
        answer = int(answer_text)

        if step is Step.CAR_TYPE:
            total = self.catalogs.car.total_types()
            if not 1 <= answer <= total:
                raise InvalidInputError(
                    f"ERROR :: 차량 타입은 1 ~ {total} 범위만 선택 가능"
                )
        elif step is Step.ENGINE:
            total = self.catalogs.engine.total_types()
            if not RETURN_TO_PREVIOUS <= answer <= total:
                raise InvalidInputError(f"ERROR :: 엔진은 1 ~ {total} 범위만 선택 가능")
        elif step is Step.BRAKE_SYSTEM:
            total = self.catalogs.brake.total_types()
            if not RETURN_TO_PREVIOUS <= answer <= total:
                raise InvalidInputError(
                    f"ERROR :: 제동장치는 1 ~ {total} 범위만 선택 가능"
                )
        elif step is Step.STEERING_SYSTEM:
            total = self.catalogs.steering.total_types()
            if not RETURN_TO_PREVIOUS <= answer <= total:
                raise InvalidInputError(
                    f"ERROR :: 조향장치는 1 ~ {total} 범위만 선택 가능"
                )
        else:
            if not RETURN_TO_START <= answer <= max(RunTest):
                raise InvalidInputError("ERROR :: Run 또는 Test 중 하나를 선택 필요")
        return answer

    def handle_selection(self, step: int, answer: int) -> Step:
        """Record ``answer`` for a part step and return the next step.

        An answer of 0 goes back one step. The run/test step is not handled
        here and raises ValueError.
        """
        step = _to_step(step)
        if answer == 0 and step >= 1:
            return Step(step - 1)

        if step is Step.CAR_TYPE:
            name = self.catalogs.car.type_name(answer)
            self.assembly.car_type = answer
            self._say(f"차량 타입으로 {name} 을 선택하셨습니다.")
        elif step is Step.ENGINE:
            name = self.catalogs.engine.type_name(answer)
            self.assembly.engine = answer
            self._say(f"{name} 엔진을 선택하셨습니다.")
        elif step is Step.BRAKE_SYSTEM:
            name = self.catalogs.brake.type_name(answer)
            self.assembly.brake_system = answer
            self._say(f"{name} 제동장치를 선택하셨습니다.")
        elif step is Step.STEERING_SYSTEM:
            name = self.catalogs.steering.type_name(answer)
            self.assembly.steering_system = answer
            self._say(f"{name} 조향장치를 선택하셨습니다.")
        else:
            raise ValueError(f"invalid step for a part selection: {step}")

        self._pause()
        return Step(step + 1)