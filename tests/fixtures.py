# type: ignore
import pytest

from intcode.runtime.peripheral import ScriptedInput, ScriptedOutput


@pytest.fixture
def with_output():
    yield ScriptedOutput()


@pytest.fixture
def with_input():
    yield ScriptedInput()
