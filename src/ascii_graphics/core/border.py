"""BorderStyle - the five characters used to outline a screen."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BorderStyle:
    """
    Characters for outlining a screen.

    The corner character is written to all four corners after the edges,
    so it always wins over the edge characters.

    Example:
        >>> style = BorderStyle.symmetric('+', '-', '|')
        >>> style.top, style.left
        ('-', '|')
    """
    corner: str
    top: str
    bottom: str
    left: str
    right: str

    def __post_init__(self) -> None:
        for name in ("corner", "top", "bottom", "left", "right"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

    @classmethod
    def full(
        cls,
        corner: str,
        top: str,
        bottom: str,
        left: str,
        right: str,
    ) -> "BorderStyle":
        """Build a style with an independent character for every edge."""
        return cls(corner=corner, top=top, bottom=bottom, left=left, right=right)

    @classmethod
    def symmetric(cls, corner: str, horizontal: str, vertical: str) -> "BorderStyle":
        """Build a style where top == bottom and left == right."""
        return cls(
            corner=corner,
            top=horizontal,
            bottom=horizontal,
            left=vertical,
            right=vertical,
        )

    @classmethod
    def named(cls, name: str) -> "BorderStyle":
        """Look up a preset style by name."""
        try:
            corner, horizontal, vertical = PRESETS[name]
        except KeyError:
            raise ValueError(
                f"Unknown border style: {name!r} (choose from {', '.join(PRESETS)})"
            ) from None
        return cls.symmetric(corner, horizontal, vertical)


# name -> (corner, horizontal, vertical)
PRESETS: dict[str, tuple[str, str, str]] = {
    "ascii": ('+', '-', '|'),
    "hash": ('#', '#', '#'),
    "dots": ('.', '.', ':'),
}

# Box drawing sets: name -> (top-left, top-right, bottom-left, bottom-right, horizontal, vertical)
BOX_STYLES: dict[str, tuple[str, str, str, str, str, str]] = {
    "single": ('┌', '┐', '└', '┘', '─', '│'),
    "double": ('╔', '╗', '╚', '╝', '═', '║'),
}
