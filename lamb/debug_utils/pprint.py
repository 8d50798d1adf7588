"""Render syntax trees back to source and runtime values to text.

`to_source` parenthesizes every compound sub-expression, so the output
re-parses to the same tree regardless of precedence or call suffixes.
"""

from __future__ import annotations

import math
from decimal import Decimal

from lamb import LambValue
from lamb.types.ast import (
    Assign, Binary, Bool, Call, Function, If, Inc, Loop, Node, Num, Prog, Str,
    Var, Zero,
)
from lamb.types.closure import Closure


def format_number(value: float) -> str:
    """Positional notation only; the tokenizer has no exponent syntax."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def number_literal(value: float) -> str:
    if math.isnan(value) or value < 0:
        raise ValueError(f"Number {value!r} has no literal form")
    if math.isinf(value):
        # Any literal past the float range reads back as infinity
        return "1" + "0" * 400
    return format_number(value)


def format_value(value: LambValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Closure):
        return repr(value)
    if callable(value):
        return f"<builtin {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)


def quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _wrap(node: Node) -> str:
    """Render `node` in a form that cannot absorb neighbouring tokens."""
    if isinstance(node, (Num, Str, Bool, Var)):
        return to_source(node)
    return f"({to_source(node)})"


def _names(names: tuple[str, ...]) -> str:
    return "(" + ", ".join(names) + ")"


def to_source(node: Node) -> str:
    match node:
        case Num(value):
            return number_literal(value)
        case Str(value):
            return quote(value)
        case Bool(value):
            return "true" if value else "false"
        case Var(name):
            return name
        case Assign(Var() as left, right):
            return f"{_wrap(left)} = {_wrap(right)}"
        case Binary(op, left, right):
            return f"{_wrap(left)} {op} {_wrap(right)}"
        case Function(params, body):
            return f"function{_names(params)} {_wrap(body)}"
        case If(cond, then, None):
            return f"if {_wrap(cond)} then {_wrap(then)}"
        case If(cond, then, otherwise):
            return f"if {_wrap(cond)} then {_wrap(then)} else {_wrap(otherwise)}"
        case Prog(body):
            return "{ " + "; ".join(_wrap(expr) for expr in body) + " }"
        case Call(func, args):
            return f"{_wrap(func)}(" + ", ".join(_wrap(arg) for arg in args) + ")"
        case Zero(names):
            return f"zero{_names(names)}"
        case Inc(names):
            return f"inc{_names(names)}"
        case Loop(limit, body):
            # A parenthesized body would read as a call on the bound
            return f"loop {_wrap(limit)} {{ {_wrap(body)} }}"
    raise ValueError(f"Cannot render {node!r}")


def program_source(program: Prog) -> str:
    """Render a top-level program, one expression per line."""
    return ";\n".join(_wrap(expr) for expr in program.body)
