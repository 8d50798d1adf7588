from __future__ import annotations

from typing import TextIO

from lamb import LambValue
from lamb.builtin.env_builtin import register
from lamb.evaluation.evaluator import evaluate
from lamb.reader.parser import parse
from lamb.types.ast import Prog
from lamb.types.environment import Environment


class Interpreter:
    """
    Parses and evaluates lamb programs against one root Environment.
    Global bindings persist across calls to `eval`.
    """

    def __init__(self, out: TextIO | None = None, builtins: bool = True):
        self.env: Environment = Environment()
        if builtins:
            register(self.env, out)

    def parse(self, code: str) -> Prog:
        return parse(code)

    def eval(self, code: str) -> LambValue:
        return evaluate(parse(code), self.env)
