"""Save screens as text files."""

import logging
from pathlib import Path

from ascii_graphics.core.screen import Screen
from ascii_graphics.render.text import TextRenderer

logger = logging.getLogger(__name__)


def save(screen: Screen, path: str | Path) -> None:
    """Write the screen rows to a UTF-8 text file, one row per line."""
    path = Path(path)
    content = TextRenderer().render(screen) + '\n'
    path.write_text(content, encoding="utf-8")
    logger.debug("saved %dx%d screen to %s", screen.width, screen.height, path)
