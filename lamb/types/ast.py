"""Syntax tree for lamb programs.

A closed set of immutable node types. The parser builds them once per parse
and the evaluator dispatches on them with structural pattern matching; nodes
are shared read-only by every closure created from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from lamb.reader.tokenizer import Token


@dataclass(frozen=True)
class Num:
    value: float


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Assign:
    # `function NAME ...` stores whatever token followed the keyword
    left: Union[Node, Token]
    right: Node


@dataclass(frozen=True)
class Binary:
    operator: str
    left: Node
    right: Node


@dataclass(frozen=True)
class Function:
    params: tuple[str, ...]
    body: Node


@dataclass(frozen=True)
class If:
    cond: Node
    then: Node
    otherwise: Optional[Node] = None


@dataclass(frozen=True)
class Prog:
    body: tuple[Node, ...]


@dataclass(frozen=True)
class Call:
    func: Node
    args: tuple[Node, ...]


@dataclass(frozen=True)
class Zero:
    names: tuple[str, ...]


@dataclass(frozen=True)
class Inc:
    names: tuple[str, ...]


@dataclass(frozen=True)
class Loop:
    max: Node
    body: Node


Node = Union[Num, Str, Bool, Var, Assign, Binary, Function, If, Prog, Call, Zero, Inc, Loop]

FALSE = Bool(False)
