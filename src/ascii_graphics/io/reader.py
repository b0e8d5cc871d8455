"""Load screens from text files."""

import logging
from pathlib import Path

from ascii_graphics.core.screen import Screen

logger = logging.getLogger(__name__)


def load(path: str | Path, default: str = ' ') -> Screen:
    """
    Load a plain text file into a Screen.

    The screen is as wide as the longest line and as tall as the number
    of lines; shorter lines are padded with `default`.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    screen = loads(text, default=default)
    logger.debug("loaded %s as %dx%d screen", path, screen.width, screen.height)
    return screen


def loads(text: str, default: str = ' ') -> Screen:
    """Build a Screen from a block of text."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("Cannot build a screen from empty text")

    width = max(len(line) for line in lines)
    if width == 0:
        raise ValueError("Cannot build a screen from blank lines only")

    screen = Screen(width, len(lines), default)
    for y, line in enumerate(lines):
        screen.text(line, 0, y)
    return screen
