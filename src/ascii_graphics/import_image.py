"""Convert images to screens of plain characters.

Each pixel of the downscaled grayscale image becomes one cell, picked
from a ramp of characters ordered dark to light.

Example:
    from ascii_graphics.import_image import from_image

    screen = from_image("logo.png", width=60)
    print(screen)
"""

import logging
from pathlib import Path
from typing import Optional, Union

try:
    from PIL import Image, ImageEnhance, ImageOps
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

from ascii_graphics.core.screen import Screen

logger = logging.getLogger(__name__)

# Dark to light on a dark terminal background
DEFAULT_RAMP = " .:-=+*#%@"

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 0.5


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image import. "
            "Install with: pip install ascii-graphics[image]"
        )


def ramp_char(level: int, ramp: str = DEFAULT_RAMP) -> str:
    """Map a 0-255 luminance level onto a character of the ramp."""
    if not 0 <= level <= 255:
        raise ValueError(f"level must be in 0..255, got {level}")
    return ramp[level * len(ramp) // 256]


def from_image(
    path: Union[str, Path],
    width: int = 78,
    height: Optional[int] = None,
    *,
    ramp: str = DEFAULT_RAMP,
    invert: bool = False,
    contrast_boost: float = 1.2,
) -> Screen:
    """
    Convert an image file to a Screen.

    Args:
        path: Path to a PNG/JPG/GIF image
        width: Target width in characters
        height: Target height in characters (default: keep aspect ratio,
            corrected for the tall shape of terminal cells)
        ramp: Characters ordered from darkest to lightest
        invert: Reverse the ramp, for light terminal backgrounds
        contrast_boost: Contrast multiplier applied after downscaling

    Raises:
        ImportError: If Pillow is not installed
        ValueError: If the size or ramp is unusable
    """
    _check_pil()

    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if len(ramp) < 2:
        raise ValueError("ramp needs at least two characters")
    if invert:
        ramp = ramp[::-1]

    with Image.open(path) as source:
        img = ImageOps.grayscale(source)

    if height is None:
        height = max(1, int(width * img.height / img.width * CELL_ASPECT))

    img = img.resize((width, height), Image.Resampling.LANCZOS)
    if contrast_boost != 1.0:
        img = ImageEnhance.Contrast(img).enhance(contrast_boost)

    pixels = img.load()
    screen = Screen(width, height)
    for y in range(height):
        for x in range(width):
            screen.set(x, y, ramp_char(pixels[x, y], ramp))

    logger.debug("converted %s to %dx%d screen", path, width, height)
    return screen
