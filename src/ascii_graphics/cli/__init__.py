"""Command line interface for ascii-graphics."""

from ascii_graphics.cli.main import main

__all__ = ["main"]
