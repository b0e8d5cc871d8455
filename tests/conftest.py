"""Shared fixtures."""

import io

import pytest

from ascii_graphics.core.screen import Screen
from ascii_graphics.render.terminal import TerminalRenderer


@pytest.fixture
def dashes() -> Screen:
    """A 5x5 screen filled with '-'."""
    return Screen(5, 5, '-')


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(stream: io.StringIO) -> TerminalRenderer:
    """Terminal renderer writing to an in-memory stream."""
    return TerminalRenderer(stream=stream)
