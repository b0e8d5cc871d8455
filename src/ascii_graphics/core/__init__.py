"""Core data structures: the character grid and border styles."""

from ascii_graphics.core.border import BorderStyle
from ascii_graphics.core.screen import Screen, create

__all__ = ["BorderStyle", "Screen", "create"]
