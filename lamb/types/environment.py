"""Runtime environment for lamb.

The Environment stores bindings of variable names to evaluated values and
supports nested scopes via a `parent` link. Closures keep a reference to the
Environment they were created in, so a scope lives as long as any closure or
active call still refers to it.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from lamb import LambValue
from lamb.errors import LambUnboundSymbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from names to lamb values."""

    __slots__ = ("vars", "parent", "__weakref__")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[str, LambValue] = {}
        self.parent: Environment | None = parent

    def extend(self) -> Environment:
        """Create a child scope of this environment."""
        return Environment(self)

    def lookup(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.parent
        return None

    def get(self, name: str) -> LambValue:
        """Return the value bound to `name`.

        Raises LambUnboundSymbol if no scope in the chain binds it.
        """
        scope = self.lookup(name)
        if scope is None:
            raise LambUnboundSymbol(f"Undefined variable {name}")
        value = scope.vars[name]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("env %#x get %s = %r (found in env %#x)", id(self), name, value, id(scope))
        return value

    def set(self, name: str, value: LambValue) -> LambValue:
        """Rebind `name` in the scope that already binds it.

        An unbound name is created as a new global when `self` is the root
        scope; from any nested scope it raises LambUnboundSymbol.
        """
        scope = self.lookup(name)
        if scope is None:
            if self.parent is not None:
                raise LambUnboundSymbol(f"Undefined variable {name}")
            scope = self
        logger.debug("env %#x set %s = %r", id(scope), name, value)
        scope.vars[name] = value
        return value

    def define(self, name: str, value: LambValue) -> LambValue:
        """Bind `name` in this scope, shadowing any outer binding."""
        logger.debug("env %#x def %s = %r", id(self), name, value)
        self.vars[name] = value
        return value

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging."""
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                frames.append(buffer.getvalue())
            env = env.parent
        return f"<Environment chain: {' -> '.join(frames)}>"
