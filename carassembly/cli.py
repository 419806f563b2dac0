"""Interactive console session for assembling, running and testing a car."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Iterable, Optional, Sequence, TextIO

from carassembly.parts import INPUT_DELAY, Step, build_catalogs
from carassembly.producer import Assembly, CarAssemblyProducer
from carassembly.view import CarAssembleView, ExitRequested, InvalidInputError


def run_session(
    lines: Iterable[str],
    out: Optional[TextIO] = None,
    delay: Optional[Callable[[float], None]] = None,
) -> Assembly:
    """Run the assembly dialogue over ``lines`` and return the final assembly.

    The session ends when the user types ``exit`` or the lines run out.
    """
    stream = out if out is not None else sys.stdout
    pause = delay if delay is not None else time.sleep
    assembly = Assembly()
    catalogs = build_catalogs()
    view = CarAssembleView(assembly, catalogs, stream, pause)
    producer = CarAssemblyProducer(assembly, catalogs, stream, pause)

    step = Step.CAR_TYPE
    answers = iter(lines)
    while True:
        view.display_user_view(step)
        stream.write("INPUT > ")
        line = next(answers, None)
        if line is None:
            break
        try:
            answer = view.validate_input(step, line)
        except ExitRequested:
            print("바이바이", file=stream)
            break
        except InvalidInputError as error:
            print(error, file=stream)
            pause(INPUT_DELAY)
            continue

        if step is Step.RUN_TEST:
            step = producer.handle_selection(answer)
        else:
            step = view.handle_selection(step, answer)
    return assembly


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="carassembly",
        description="Assemble a car from parts, then run or test it.",
    )
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())