"""Tree-walking evaluator for lamb.

`evaluate` dispatches on the node type with structural pattern matching.
It is the only place that mutates Environment bindings and the only place
that creates closures.
"""

from __future__ import annotations

from lamb import LambValue
from lamb.errors import LambError, LambInvalidSymbol, LambTypeError
from lamb.evaluation.apply import apply
from lamb.evaluation.operators import apply_op, is_number
from lamb.types.ast import (
    Assign, Binary, Bool, Call, Function, If, Inc, Loop, Node, Num, Prog, Str,
    Var, Zero,
)
from lamb.types.closure import Closure
from lamb.types.environment import Environment


def evaluate(node: Node, env: Environment) -> LambValue:
    match node:
        case Num(value) | Str(value) | Bool(value):
            return value

        case Var(name):
            return env.get(name)

        case Assign(Var(name), right):
            return env.set(name, evaluate(right, env))

        case Assign(left, _):
            raise LambInvalidSymbol(f"Cannot assign to {left!r}")

        case Zero(names):
            for name in names:
                env.set(name, 0.0)
            return 0.0

        case Inc(names):
            result: LambValue = False
            for name in names:
                current = env.get(name)
                if not is_number(current):
                    raise LambTypeError(f"Cannot increment {name}: {current!r} is not a number")
                result = env.set(name, current + 1)
            return result

        case Binary(op, left, right):
            # Both operands are always evaluated, && and || included
            return apply_op(op, evaluate(left, env), evaluate(right, env))

        case Function(params, body):
            return Closure(params, body, env)

        case If(cond, then, otherwise):
            if evaluate(cond, env) is not False:
                return evaluate(then, env)
            return evaluate(otherwise, env) if otherwise is not None else False

        case Loop(limit, body):
            return evaluate_loop(limit, body, env)

        case Prog(body):
            result = False
            for expr in body:
                result = evaluate(expr, env)
            return result

        case Call(func, args):
            fn = evaluate(func, env)
            return apply(fn, [evaluate(arg, env) for arg in args], evaluate)

    raise LambError(f"I don't know how to evaluate {node!r}")


def evaluate_loop(limit: Node, body: Node, env: Environment) -> LambValue:
    """Run `body` while a hidden counter from 0 stays below `limit`.

    A fractional limit therefore runs ceil(limit) times, not floor(limit).
    """
    count = evaluate(limit, env)
    if not is_number(count):
        raise LambTypeError(f"Cannot loop to {limit!r}")
    result: LambValue = False
    i = 0
    while i < count:
        result = evaluate(body, env)
        i += 1
    return result
