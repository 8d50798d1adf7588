import io

import pytest

from lamb.builtin.env_builtin import register
from lamb.evaluation.evaluator import evaluate
from lamb.reader.parser import parse
from lamb.types.environment import Environment


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def env(out):
    """Fresh root environment with the console built-ins writing to `out`."""
    e = Environment()
    register(e, out)
    return e


@pytest.fixture
def run(env):
    """Parse and evaluate a program against the shared root environment."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
