import pytest

from jlisp.builtin.env_builtin import register
from jlisp.interpreter import Interpreter
from jlisp.types.environment import Environment
from jlisp.types.value import to_string


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the standard prelude."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(interp):
    """Evaluate lines in order and return the rendering of the last result."""
    def _run(*lines):
        result = None
        for line in lines:
            result = interp.eval(line)
        return to_string(result)
    return _run
