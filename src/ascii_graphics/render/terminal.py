"""Print screens to a terminal."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from ascii_graphics.core.screen import Screen

CLEAR = '\x1b[2J\x1b[H'
HIDE_CURSOR = '\x1b[?25l'
SHOW_CURSOR = '\x1b[?25h'


class Terminal:
    """Low-level terminal operations on a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text and flush."""
        self.stream.write(text)
        self.stream.flush()

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block."""
        self.hide_cursor()
        try:
            yield
        finally:
            self.show_cursor()


class TerminalRenderer:
    """
    Clear the terminal and print a Screen row by row.

    This is the output side of ``Screen.show`` and of every animation
    frame.
    """

    def __init__(self, stream: TextIO | None = None, clear: bool = True):
        self.terminal = Terminal(stream)
        self.clear = clear

    def render(self, screen: Screen) -> str:
        """Render screen to the text that ``display`` writes."""
        body = ''.join(f"{row}\n" for row in screen.rows())
        return (CLEAR + body) if self.clear else body

    def display(self, screen: Screen) -> None:
        """Write the rendered screen to the stream."""
        self.terminal.write(self.render(screen))
