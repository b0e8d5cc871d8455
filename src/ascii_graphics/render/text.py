"""Render a screen to plain text."""

from ascii_graphics.core.screen import Screen


class TextRenderer:
    """Render a Screen to newline separated rows."""

    def __init__(self, strip_trailing: bool = False):
        self.strip_trailing = strip_trailing

    def render(self, screen: Screen) -> str:
        """Render screen to plain text."""
        lines = screen.render()
        if self.strip_trailing:
            lines = [line.rstrip() for line in lines]
        return '\n'.join(lines)
