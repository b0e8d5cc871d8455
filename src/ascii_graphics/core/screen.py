"""Screen - fixed-size character grid with fill/stroke drawing."""

import math
import struct
from typing import Callable, Iterator, Optional

from ascii_graphics.core.border import BOX_STYLES, BorderStyle

UpdateFunction = Callable[["Screen", int], bool]

_FLOAT32 = struct.Struct('f')


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _check_char(value: str, name: str = "value") -> str:
    # Line breaks would split a row when rendered or saved
    if not isinstance(value, str) or len(value) != 1 or value.splitlines() != [value]:
        raise ValueError(
            f"{name} must be a single non line-break character, got {value!r}"
        )
    return value


class Screen:
    """
    A fixed-size 2D grid of characters plus the fill/stroke state
    used by the shape drawing methods.

    Cells are stored row-major in a flat list (index = y * width + x).
    Every access outside the grid raises IndexError; nothing is clipped,
    so callers are responsible for keeping geometry in bounds. Only
    ``text`` is lenient and truncates at the right edge.

    All drawing and configuration methods return the screen so calls
    can be chained:

        >>> screen = create(10, 10)
        >>> _ = (screen
        ...     .background(' ')
        ...     .border(BorderStyle.symmetric('+', '-', '|'))
        ...     .stroke('0')
        ...     .line(2, 6, 6, 2)
        ...     .text("hello", 2, 8))
    """

    def __init__(self, width: int, height: int, default: str = ' '):
        if width <= 0 or height <= 0:
            raise ValueError(f"Screen size must be positive, got ({width}, {height})")
        _check_char(default, "default")
        self._width = width
        self._height = height
        self._buffer: list[str] = [default] * (width * height)
        self.fill_enabled = False
        self.fill_char = ' '
        self.stroke_enabled = False
        self.stroke_char = ' '
        self.update_function: Optional[UpdateFunction] = None

    @classmethod
    def from_size(cls, size: tuple[int, int]) -> "Screen":
        """Create a blank screen from a (width, height) tuple."""
        width, height = size
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"index out of bounds: the size is ({self._width}, {self._height}) "
                f"but got ({x}, {y})"
            )
        return y * self._width + x

    def get(self, x: int, y: int) -> str:
        """Get the character at (x, y)."""
        return self._buffer[self._index(x, y)]

    def set(self, x: int, y: int, value: str) -> "Screen":
        """Set the character at (x, y)."""
        self._buffer[self._index(x, y)] = _check_char(value)
        return self

    def __getitem__(self, pos: tuple[int, int]) -> str:
        """Get a character using indexing: screen[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        """Set a character using indexing: screen[x, y] = 'c'."""
        x, y = pos
        self.set(x, y, value)

    def rows(self) -> Iterator[str]:
        """Iterate over rows as strings, top to bottom."""
        for y in range(self._height):
            start = y * self._width
            yield ''.join(self._buffer[start:start + self._width])

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Iterate over all cells as (x, y, char) tuples."""
        for i, char in enumerate(self._buffer):
            y, x = divmod(i, self._width)
            yield x, y, char

    def render(self) -> list[str]:
        """Return the grid as `height` strings of `width` characters."""
        return list(self.rows())

    def __str__(self) -> str:
        return '\n'.join(self.rows())

    def __repr__(self) -> str:
        return f"Screen(width={self._width}, height={self._height})"

    def copy(self) -> "Screen":
        """Create an independent copy with the same cells and draw state."""
        other = Screen(self._width, self._height)
        other._buffer = list(self._buffer)
        other.fill_enabled = self.fill_enabled
        other.fill_char = self.fill_char
        other.stroke_enabled = self.stroke_enabled
        other.stroke_char = self.stroke_char
        other.update_function = self.update_function
        return other

    def shift_left(self, n: int) -> "Screen":
        """
        Shift every row left by n columns.

        Works by swapping column x with column x + n, left to right, in
        every row. The vacated columns on the right are not cleared: they
        end up holding whatever the swaps moved there (for n == 1 the row
        is rotated left by one).
        """
        if n < 0 or n > self._width:
            raise IndexError(f"cannot shift by {n} columns: the width is {self._width}")
        buf = self._buffer
        for x in range(self._width - n):
            for y in range(self._height):
                a = self._index(x, y)
                b = self._index(x + n, y)
                buf[a], buf[b] = buf[b], buf[a]
        return self

    def __ilshift__(self, n: int) -> "Screen":
        return self.shift_left(n)

    # ------------------------------------------------------------------
    # Draw state
    # ------------------------------------------------------------------

    def fill(self, value: Optional[str] = None) -> "Screen":
        """Enable fill for future draws, optionally changing the character."""
        if value is not None:
            self.fill_char = _check_char(value)
        self.fill_enabled = True
        return self

    def no_fill(self) -> "Screen":
        """Disable fill for future draws. The fill character is kept."""
        self.fill_enabled = False
        return self

    def stroke(self, value: Optional[str] = None) -> "Screen":
        """Enable stroke for future draws, optionally changing the character."""
        if value is not None:
            self.stroke_char = _check_char(value)
        self.stroke_enabled = True
        return self

    def no_stroke(self) -> "Screen":
        """Disable stroke for future draws. The stroke character is kept."""
        self.stroke_enabled = False
        return self

    # ------------------------------------------------------------------
    # Whole-screen drawing
    # ------------------------------------------------------------------

    def background(self, value: str) -> "Screen":
        """Set every cell to value."""
        self._buffer = [_check_char(value)] * (self._width * self._height)
        return self

    def solid_border(self, value: str) -> "Screen":
        """Outline the screen with a single character."""
        return self.border(BorderStyle.symmetric(value, value, value))

    def border(self, style: BorderStyle) -> "Screen":
        """
        Outline the screen with a border style.

        Edges are written first and the corners last, so a corner is
        never left holding an edge character.
        """
        width, height = self._width, self._height

        for x in range(width):
            self.set(x, 0, style.top)
            self.set(x, height - 1, style.bottom)

        for y in range(height):
            self.set(0, y, style.left)
            self.set(width - 1, y, style.right)

        self.set(0, 0, style.corner)
        self.set(0, height - 1, style.corner)
        self.set(width - 1, 0, style.corner)
        self.set(width - 1, height - 1, style.corner)

        return self

    def box_border(self, name: str = "single") -> "Screen":
        """Outline the screen with a box drawing set ("single" or "double")."""
        try:
            tl, tr, bl, br, h, v = BOX_STYLES[name]
        except KeyError:
            raise ValueError(
                f"Unknown box style: {name!r} (choose from {', '.join(BOX_STYLES)})"
            ) from None

        self.border(BorderStyle.symmetric(tl, h, v))
        right, bottom = self._width - 1, self._height - 1
        self.set(right, 0, tr)
        self.set(0, bottom, bl)
        self.set(right, bottom, br)
        return self

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def text(self, value: str, x: int, y: int) -> "Screen":
        """
        Write text starting at (x, y), one column per character.

        Text that runs past the right edge is truncated; it never wraps
        onto the next row.
        """
        chars = iter(value)
        for i in range(x, self._width):
            char = next(chars, None)
            if char is None:
                break
            self.set(i, y, char)
        return self

    def rect(self, x: int, y: int, width: int, height: int) -> "Screen":
        """
        Draw a rectangle centered at (x, y).

        Covers columns x - width // 2 .. x + width // 2 and rows
        y - height // 2 .. y + height // 2, inclusive. The fill pass runs
        first, then the stroke pass draws the four edges over it.
        """
        half_w, half_h = width // 2, height // 2
        xs = range(x - half_w, x + half_w + 1)
        ys = range(y - half_h, y + half_h + 1)

        if self.fill_enabled:
            for i in xs:
                for j in ys:
                    self.set(i, j, self.fill_char)

        if self.stroke_enabled:
            for i in xs:
                self.set(i, y - half_h, self.stroke_char)
                self.set(i, y + half_h, self.stroke_char)
            for j in ys:
                self.set(x - half_w, j, self.stroke_char)
                self.set(x + half_w, j, self.stroke_char)

        return self

    def line(self, x1: int, y1: int, x2: int, y2: int) -> "Screen":
        """
        Draw a line from (x1, y1) to (x2, y2) if stroke is enabled.

        Steps one column at a time and accumulates the slope, so exactly
        one cell is drawn per column. Steep lines therefore have gaps and
        a vertical line is a single cell.

        The slope and the running y are kept in single precision, which
        decides the rounding of lines that pass close to a half cell.
        """
        if not self.stroke_enabled:
            return self

        dx = _f32(_f32(x2) - _f32(x1))
        dy = _f32(_f32(y2) - _f32(y1))
        if dx:
            slope = _f32(dy / dx)
        elif dy:
            slope = math.copysign(math.inf, dy)
        else:
            slope = math.nan

        x, end = min(x1, x2), max(x1, x2)
        y = _f32(min(y1, y2) if slope > 0 else max(y1, y2))

        while x <= end:
            self.set(x, _round_half_away(y), self.stroke_char)
            x += 1
            y = _f32(y + slope)

        return self

    def circle(self, x: int, y: int, radius: int) -> "Screen":
        """
        Draw a rough circle centered at (x, y).

        Cells strictly inside the radius get the fill character; cells at
        squared distance r^2 or r^2 + 1 get the stroke character, which
        gives a closed ring at character resolution.
        """
        r2 = radius * radius
        for i in range(x - radius, x + radius + 1):
            for j in range(y - radius, y + radius + 1):
                dist = (i - x) ** 2 + (j - y) ** 2
                if dist < r2 and self.fill_enabled:
                    self.set(i, j, self.fill_char)
                elif (dist == r2 or dist == r2 + 1) and self.stroke_enabled:
                    self.set(i, j, self.stroke_char)
        return self

    # ------------------------------------------------------------------
    # Output and animation
    # ------------------------------------------------------------------

    def show(self) -> None:
        """Clear the terminal and print the screen to stdout."""
        from ascii_graphics.render.terminal import TerminalRenderer
        TerminalRenderer().display(self)

    def set_update(self, update: UpdateFunction) -> None:
        """
        Set the per-frame update function used by ``run``.

        It is called with the screen and the frame number and returns
        False to stop the animation.
        """
        self.update_function = update

    def run(self, fps: int) -> int:
        """Animate at `fps` frames per second until the update function returns False."""
        from ascii_graphics.animation import Animation
        return Animation(fps).run(self)


def create(width: int, height: int) -> Screen:
    """Create a new blank (space filled) screen."""
    return Screen(width, height, ' ')
