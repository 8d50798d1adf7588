"""Binary operator semantics.

Only the boolean `false` is falsy. `&&` and `||` receive both operands
already evaluated; they choose a result, they never skip evaluation.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from lamb import LambValue
from lamb.errors import LambError, LambTypeError, LambZeroDivisionError


def is_number(x: LambValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def num(x: LambValue) -> float:
    if not is_number(x):
        raise LambTypeError(f"Expected number but got {x!r}")
    return x


def divisor(x: LambValue) -> float:
    if num(x) == 0:
        raise LambZeroDivisionError("Divide by zero")
    return x


def same_value(a: LambValue, b: LambValue) -> bool:
    """Strict equality: same kind and same value; functions by identity."""
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, (str, bool)):
        return type(a) is type(b) and a == b
    return a is b


_ARITHMETIC: dict[str, Callable[[float, float], LambValue]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def apply_op(op: str, a: LambValue, b: LambValue) -> LambValue:
    if op in _ARITHMETIC:
        return _ARITHMETIC[op](num(a), num(b))
    match op:
        case "/":
            return num(a) / divisor(b)
        case "%":
            # Remainder takes the sign of the dividend
            dividend = num(a)
            if math.isinf(dividend):
                divisor(b)
                return math.nan
            return math.fmod(dividend, divisor(b))
        case "&&":
            return b if a is not False else False
        case "||":
            return a if a is not False else b
        case "==":
            return same_value(a, b)
        case "!=":
            return not same_value(a, b)
    raise LambError(f"Can't apply operator {op}")
