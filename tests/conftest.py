import pytest

from minirack.builtin.env_builtin import new_global_frame
from minirack.evaluation.evaluator import evaluate
from minirack.interpreter import Interpreter
from minirack.reader.parser import parse


@pytest.fixture
def env():
    """A fresh global frame seeded with every primitive."""
    return new_global_frame()


@pytest.fixture
def run(env):
    """Evaluate source text in `env` and return the last value."""
    def _run(code):
        result = None
        for expr in parse(code):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    """A session without the prelude, so only primitives are bound."""
    return Interpreter(prelude=None)


@pytest.fixture
def std():
    """A session with the bundled prelude loaded."""
    return Interpreter()
