"""A clickable menu button with hover and click states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Any, Sequence

from arenakit.geometry import DEFAULT_SETTINGS, Rect, TileSettings

BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3


class ClipType(IntEnum):
    """Visual state of a button; also the index of its sprite clip."""

    DEFAULT = 0
    HOVER = 1
    CLICK = 2
    UNCLICK = 3


CLIP_COUNT = len(ClipType)


class MouseEventType(Enum):
    MOTION = auto()
    BUTTON_DOWN = auto()
    BUTTON_UP = auto()
    OTHER = auto()


@dataclass(frozen=True)
class MouseEvent:
    """An input event; button is the mouse button for press and release."""

    type: MouseEventType
    button: int = BUTTON_LEFT


def _copy_rect(r: Rect) -> Rect:
    return Rect(r.x, r.y, r.w, r.h)


class Button:
    """A button placed at screen_pos with one sprite clip per state."""

    def __init__(self, screen_pos: Rect, clips: Sequence[Rect]) -> None:
        if len(clips) != CLIP_COUNT:
            raise ValueError(f"a button needs {CLIP_COUNT} clips, got {len(clips)}")
        self.screen_pos = _copy_rect(screen_pos)
        self.clips = [_copy_rect(c) for c in clips]
        self.state = ClipType.DEFAULT
        self.image: Any = None
        self.text: Any = None
        self.mouse_x = 0
        self.mouse_y = 0

    @classmethod
    def from_scale(
        cls,
        screen_pos: Rect,
        ws: float = 2,
        hs: float = 1,
        settings: TileSettings | None = None,
    ) -> Button:
        """Clips laid out side by side, each ws by hs input tiles."""
        tile = (settings or DEFAULT_SETTINGS).tile_size_input
        clips = [
            Rect(int(c * tile * ws), 0, int(tile * ws), int(tile * hs)) for c in ClipType
        ]
        return cls(screen_pos, clips)

    @classmethod
    def from_clip(cls, screen_pos: Rect, clip: Rect) -> Button:
        """All states share one clip."""
        return cls(screen_pos, [clip] * CLIP_COUNT)

    def __copy__(self) -> Button:
        return type(self)(self.screen_pos, self.clips)

    @property
    def clip(self) -> Rect:
        """The sprite clip for the current state."""
        return self.clips[self.state]

    def _contains(self, mouse_x: int, mouse_y: int, viewport: Rect) -> bool:
        left = viewport.x + self.screen_pos.x
        top = viewport.y + self.screen_pos.y
        return (
            left <= mouse_x <= left + self.screen_pos.w
            and top <= mouse_y <= top + self.screen_pos.h
        )

    def evaluate(self, event: MouseEvent, mouse_x: int, mouse_y: int, viewport: Rect) -> ClipType:
        """Update the state from an event and the mouse position; return it."""
        self.mouse_x = mouse_x
        self.mouse_y = mouse_y
        mouse_types = (
            MouseEventType.MOTION,
            MouseEventType.BUTTON_DOWN,
            MouseEventType.BUTTON_UP,
        )
        if event.type not in mouse_types or not self._contains(mouse_x, mouse_y, viewport):
            self.state = ClipType.DEFAULT
            return self.state
        match event.type:
            case MouseEventType.MOTION:
                self.state = ClipType.HOVER
            case MouseEventType.BUTTON_DOWN:
                if event.button == BUTTON_LEFT:
                    self.state = ClipType.CLICK
            case MouseEventType.BUTTON_UP:
                if event.button == BUTTON_LEFT:
                    self.state = ClipType.HOVER
        return self.state

    def text_position(self, text_width: int) -> Rect:
        """Rectangle of the given width centred horizontally on the button."""
        gap = self.screen_pos.w - text_width
        pos = _copy_rect(self.screen_pos)
        pos.x += int(gap / 2)
        pos.w -= gap
        return pos