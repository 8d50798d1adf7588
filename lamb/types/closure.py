"""Function values for lamb."""

from __future__ import annotations

from lamb.types.ast import Node
from lamb.types.environment import Environment


class Closure:
    """A first-class function: parameter names, body and the defining scope."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: Node, env: Environment):
        self.params: tuple[str, ...] = params
        self.body: Node = body
        self.env: Environment = env

    def bind_arguments(self, args: list) -> Environment:
        """Return a fresh child of the closure scope with parameters bound.

        Missing arguments are bound to false and surplus ones are dropped.
        """
        scope = self.env.extend()
        for i, name in enumerate(self.params):
            scope.define(name, args[i] if i < len(args) else False)
        return scope

    def __repr__(self) -> str:
        return f"<function({', '.join(self.params)})>"
