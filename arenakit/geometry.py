"""Rectangles, colours, tile scaling settings and viewport layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Rect:
    """An axis-aligned integer rectangle."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True if both rectangles share an area of positive size."""
        if self.is_empty or other.is_empty:
            return False
        left = max(self.x, other.x)
        right = min(self.x + self.w, other.x + other.w)
        if right <= left:
            return False
        top = max(self.y, other.y)
        bottom = min(self.y + self.h, other.y + other.h)
        return bottom > top

    def center(self) -> Rect:
        """Return the centre point as a 1x1 rectangle."""
        return Rect(self.x + _tdiv(self.w, 2), self.y + _tdiv(self.h, 2), 1, 1)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass(frozen=True)
class TileSettings:
    """Tile sizes of the input sprites, the physics grid and the rendering."""

    tile_size_input: int = 16
    tile_size_physics: int = 16
    tile_size_render: int = 32

    @property
    def scale_render(self) -> float:
        return self.tile_size_render / self.tile_size_physics

    def to_screen(self, screen: Rect, position: Rect) -> Rect:
        """Map a world position onto the given screen rectangle."""
        scale = self.scale_render
        return Rect(
            int(position.x * scale - screen.x),
            int(position.y * scale - screen.y),
            1,
            1,
        )


DEFAULT_SETTINGS = TileSettings()


class Position(IntEnum):
    """Where a viewport sits on the window."""

    CENTER = 0
    RIGHT = 1
    LEFT = 2
    TOP = 3
    BOTTOM = 4
    WHOLE = 5
    RIGHT_FILL = 6
    LEFT_FILL = 7
    TOP_FILL = 8
    BOTTOM_FILL = 9


@dataclass
class Viewport:
    """A region of the window placed according to a position and a border."""

    position: Position
    border: Rect
    rect: Rect = field(default_factory=Rect)

    def compute(self, screen_width: int, screen_height: int) -> Rect:
        """Work out the viewport rectangle for a window of the given size."""
        b = self.border
        sw, sh = screen_width, screen_height
        match self.position:
            case Position.LEFT:
                rect = Rect(0, b.y, b.w, sh - b.h)
            case Position.LEFT_FILL:
                rect = Rect(0, b.y, sw - b.w, sh - b.h)
            case Position.TOP:
                rect = Rect(b.x, 0, sw - b.w, sh - b.h - b.y)
            case Position.BOTTOM:
                rect = Rect(b.x, sh - b.h, sw - b.w, 0)
            case Position.CENTER:
                rect = Rect(_tdiv(sw, 2) - _tdiv(b.w, 2), b.y, b.w, sh - b.h - b.y)
            case Position.WHOLE:
                rect = Rect(0, 0, sw, sh)
            case _:
                rect = Rect(sw - b.w, b.y, b.w, sh - b.h - b.y)
        self.rect = rect
        return rect


def reduce_to_zero(value, amount):
    """Move value toward zero by amount without crossing zero."""
    if value > 0:
        return max(value - amount, 0)
    if value < 0:
        return min(value + amount, 0)
    return value