"""Renderers for outputting screens."""

from ascii_graphics.render.terminal import Terminal, TerminalRenderer
from ascii_graphics.render.text import TextRenderer

__all__ = ["Terminal", "TerminalRenderer", "TextRenderer"]
