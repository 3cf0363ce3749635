import pytest

from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment
from minilisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate one source fragment against the shared test environment."""
    def _run(source):
        return evaluate(source, env)
    return _run
