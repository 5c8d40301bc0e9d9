"""Shared fixtures for core unit tests"""

import pytest

from cfgdiff.core.models import LineSequence


NUMBERED = [str(i) for i in range(1, 11)]     # "1" .. "10"


@pytest.fixture(name="numbered")
def numbered_fixture():
    return LineSequence(tuple(NUMBERED))


@pytest.fixture(name="edited")
def edited_fixture():
    """NUMBERED with line 5 replaced."""
    lines = list(NUMBERED)
    lines[4] = "five"
    return LineSequence(tuple(lines))
