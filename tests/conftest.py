import pytest

from zeus.builtin.env_builtin import standard_environment
from zeus.evaluation.evaluator import evaluate
from zeus.interpreter import Interpreter
from zeus.reader.parser import read_all


@pytest.fixture
def env():
    """
    Provides a fresh root environment for each test,
    prepopulated with the standard builtins and its own runtime state.
    """
    return standard_environment()


@pytest.fixture
def itp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`; return the last value."""

    def _run(code):
        result = []
        for expr in read_all(code):
            result = evaluate(expr, env)
        return result

    return _run
