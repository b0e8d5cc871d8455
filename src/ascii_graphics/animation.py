"""Frame loop for animating a Screen.

Example:
    from ascii_graphics import create, BorderStyle

    def update(screen, frame):
        if frame > 99:
            return False
        (screen
            .background(' ')
            .border(BorderStyle.symmetric('+', '-', '|'))
            .text(str(frame), 3, 3))
        return True

    screen = create(20, 8)
    screen.set_update(update)
    screen.run(10)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable, Optional

from ascii_graphics.render.terminal import TerminalRenderer

if TYPE_CHECKING:
    from ascii_graphics.core.screen import Screen, UpdateFunction

logger = logging.getLogger(__name__)


class Animation:
    """
    Drive a screen's update function at a fixed frame rate.

    Each frame calls ``update(screen, frame)``; a False return ends the
    loop before anything is drawn for that frame. Otherwise the screen is
    rendered and the loop sleeps for ``1000 // fps`` milliseconds. There
    is no timeout: an update function that never returns False runs
    until interrupted.
    """

    def __init__(
        self,
        fps: int,
        renderer: Optional[TerminalRenderer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.renderer = renderer or TerminalRenderer()
        self.sleep = sleep
        self.frames = 0

    @property
    def delay(self) -> float:
        """Seconds between frames, in whole milliseconds."""
        return (1000 // self.fps) / 1000

    def run(self, screen: Screen, update: Optional[UpdateFunction] = None) -> int:
        """
        Run until the update function returns False.

        Uses ``screen.update_function`` unless `update` is given. Returns
        the number of frames rendered. ``frames`` holds the same count
        while running, so it is still valid if the loop is interrupted.
        """
        self.frames = 0
        update = update or screen.update_function
        if update is None:
            logger.debug("no update function set, nothing to animate")
            return 0

        logger.debug("animation started at %d fps", self.fps)
        while update(screen, self.frames):
            self.renderer.display(screen)
            self.frames += 1
            self.sleep(self.delay)

        logger.debug("animation stopped after %d frames", self.frames)
        return self.frames
