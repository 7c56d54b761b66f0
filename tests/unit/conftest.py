"""Unit test fixtures."""

import io

import pytest

from logger_pro import options
from logger_pro.output import ConsoleOutput


@pytest.fixture(autouse=True)
def reset_options():
    """Restore built-in logger defaults around every test."""
    options.reset()
    yield
    options.reset()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(buffer: io.StringIO) -> ConsoleOutput:
    """ConsoleOutput writing to an in-memory buffer, keeping ANSI codes."""
    return ConsoleOutput(file=buffer, color=True)
