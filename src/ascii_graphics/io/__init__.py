"""File I/O for screens."""

from ascii_graphics.io.reader import load, loads
from ascii_graphics.io.writer import save

__all__ = ["load", "loads", "save"]
