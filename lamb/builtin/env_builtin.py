"""Host built-ins made visible as globals of a root Environment.

These are the console and timing helpers a command-line host needs. Each one
receives evaluated lamb values positionally and returns a lamb value.
"""

from __future__ import annotations

import sys
import time
from typing import TextIO

from lamb import LambValue
from lamb.debug_utils.pprint import format_value
from lamb.evaluation.apply import apply
from lamb.evaluation.evaluator import evaluate
from lamb.types.environment import Environment


def register(env: Environment, out: TextIO | None = None) -> Environment:
    """Define print, println and time in `env`, writing to `out` (stdout by default).

    Surplus arguments are ignored, as they are for closures.
    """

    def stream() -> TextIO:
        return out if out is not None else sys.stdout

    def lamb_print(value: LambValue = False, *_: LambValue) -> LambValue:
        stream().write(format_value(value))
        return False

    def lamb_println(value: LambValue = False, *_: LambValue) -> LambValue:
        stream().write(format_value(value) + "\n")
        return False

    def lamb_time(fn: LambValue = False, *_: LambValue) -> LambValue:
        start = time.perf_counter()
        try:
            return apply(fn, [], evaluate)
        finally:
            elapsed = (time.perf_counter() - start) * 1000.0
            stream().write(f"time: {elapsed:.3f}ms\n")

    lamb_print.__name__ = "print"
    lamb_println.__name__ = "println"
    lamb_time.__name__ = "time"
    for fn in (lamb_print, lamb_println, lamb_time):
        env.define(fn.__name__, fn)
    return env
