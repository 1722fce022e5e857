import pytest

from slisp.interpreter import Interpreter


# Most tests only need the native builtins; loading the .sl libraries is
# reserved for the tests that exercise them.
@pytest.fixture
def interp():
    return Interpreter(stdlib=False)


@pytest.fixture
def std_interp():
    return Interpreter()
