"""
ascii-graphics: draw shapes and text on a character grid

Quick Start:
    >>> import ascii_graphics as ag
    >>> screen = ag.create(10, 10)
    >>> _ = (screen
    ...     .background(' ')
    ...     .border(ag.BorderStyle.symmetric('+', '-', '|'))
    ...     .stroke('0')
    ...     .line(2, 6, 6, 2)
    ...     .text("hello", 2, 8))
    >>> print(screen)
    +--------+
    |        |
    |     0  |
    |    0   |
    |   0    |
    |  0     |
    | 0      |
    |        |
    | hello  |
    +--------+

Features:
    - Fixed-size character grid with strict bounds checking
    - Fill/stroke drawing state with chainable calls
    - Rectangles, lines, circles, text and borders
    - Terminal output and a simple frame-rate animation loop
    - Save/load screens as text, convert images to characters
"""

import logging

__version__ = "0.1.0"

# Core types
from ascii_graphics.core.border import BorderStyle
from ascii_graphics.core.screen import Screen, create

# Output
from ascii_graphics.animation import Animation
from ascii_graphics.render.terminal import TerminalRenderer
from ascii_graphics.render.text import TextRenderer

# Convenience functions
from ascii_graphics.io.reader import load
from ascii_graphics.io.writer import save

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "BorderStyle",
    "Screen",
    "create",
    # Output
    "Animation",
    "TerminalRenderer",
    "TextRenderer",
    # I/O
    "load",
    "save",
]
