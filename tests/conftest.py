import pytest

from conslisp.evaluation.evaluator import evaluate
from conslisp.interpreter import Interpreter
from conslisp.reader.parser import parse
from conslisp.types.environment import Environment

# Most tests work on a bare root environment (primitives only). Tests that
# need the packaged prelude build their own Interpreter().


@pytest.fixture
def env():
    """Return a fresh root environment for each test."""
    return Environment.new_root()


@pytest.fixture
def run(env):
    """Read one expression from source and evaluate it in the `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run


@pytest.fixture
def interp():
    return Interpreter(prelude=None)
