# Core type aliases for the lamb expression language.
# Runtime values are plain Python objects: float for numbers, str, bool and
# Closure (or a host-provided Python callable) for functions.
#
# Naming guidance:
# - Node:      use in reader/parser code for syntax tree nodes (lamb.types.ast).
# - LambValue: use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

# Runtime value alias
LambValue = Any

# Evaluator function type: passed to helpers that must re-enter evaluation
EvaluatorFn = Callable[..., LambValue]
