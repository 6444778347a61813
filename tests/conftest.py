import pytest

from yisp.runtime_context import set_strict, is_strict
from yisp.types.environment import Environment
from yisp.interpreter import Interpreter


# Every test starts from the lenient strict-mode default and gets its
# previous value restored afterwards.
@pytest.fixture(autouse=True)
def _reset_strict_mode():
    previous = is_strict()
    set_strict(False)
    yield
    set_strict(previous)


@pytest.fixture
def env():
    """Fresh global frame."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with no prelude."""
    return Interpreter()


@pytest.fixture
def strict():
    set_strict(True)
    yield
    set_strict(False)
