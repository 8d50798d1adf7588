"""Application engine for lamb.

Centralizes call semantics so the evaluator and host built-ins share them:
- Closures run their body in a fresh child of the captured scope.
- Host callables registered in the environment receive the evaluated
  arguments positionally.
"""

import logging

from lamb import LambValue, EvaluatorFn
from lamb.errors import LambTypeError
from lamb.types.closure import Closure

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LambValue], evaluate_fn: EvaluatorFn) -> LambValue:
    scope = fn.bind_arguments(args)
    logger.debug("call %r in env %#x with %r", fn, id(scope), args)
    return evaluate_fn(fn.body, scope)


def apply(fn: LambValue, args: list[LambValue], evaluate_fn: EvaluatorFn) -> LambValue:
    """Apply either a Closure or a Python callable, or raise LambTypeError."""
    if isinstance(fn, Closure):
        return apply_closure(fn, args, evaluate_fn)
    if callable(fn):
        return fn(*args)
    raise LambTypeError(f"Cannot call non-function {fn!r}")
