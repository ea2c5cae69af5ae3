"""Named properties and the basic map block with conditional animations."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Protocol

from arenakit.geometry import DEFAULT_SETTINGS, Color, Rect, TileSettings

ValueChecker = Callable[[], bool]


class Playable(Protocol):
    def play(self) -> None: ...

    def stop(self) -> None: ...


class Properties:
    """A store of named values of type int, float, str or bool."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def get(self, name: str) -> Any:
        """Return the value of a property; raise KeyError if it is missing."""
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"Property {name!r} does not exist") from None

    def set_and_get(self, name: str, value: Any) -> Any:
        self._values[name] = value
        return value

    def get_checker(self, name: str, value: Any) -> ValueChecker:
        """Return a callable telling whether the property currently equals value."""
        self.get(name)
        return lambda: self._values.get(name) == value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __copy__(self) -> Properties:
        clone = Properties()
        clone._values = dict(self._values)
        return clone


@dataclass
class AnimationHelper:
    """An animation together with the conditions under which it plays."""

    animation: Any
    checkers: list[ValueChecker] = field(default_factory=list)

    def __call__(self) -> bool:
        return all(checker() for checker in self.checkers)


class Block:
    """A rectangular tile or obstacle on the map."""

    def __init__(self, x: int = 0, y: int = 0, settings: TileSettings | None = None) -> None:
        settings = settings or DEFAULT_SETTINGS
        self.hitbox = Rect(x, y, settings.tile_size_physics, settings.tile_size_physics)
        self.map_color = Color(0, 0, 0, 0)
        self.clip = Rect()
        self.position_screen = Rect()
        self.do_plot = True
        self.has_collision = True
        self.obscures_vision = True
        self.image: Any = None
        self.properties = Properties()
        self._animations: list[AnimationHelper] = []
        self._current_animation: Any = None

    def __copy__(self) -> Block:
        clone = type(self).__new__(type(self))
        Block.__init__(clone)
        clone.hitbox = copy.copy(self.hitbox)
        clone.map_color = self.map_color
        clone.clip = copy.copy(self.clip)
        clone.image = self.image
        clone.do_plot = self.do_plot
        clone.has_collision = self.has_collision
        clone.obscures_vision = self.obscures_vision
        return clone

    def position(self) -> Rect:
        """Centre of the hitbox as a 1x1 rectangle."""
        return self.hitbox.center()

    @property
    def current_animation(self) -> Any:
        return self._current_animation

    def on_screen(self, screen: Rect, settings: TileSettings | None = None) -> bool:
        """Tell whether the block is visible and, if so, update its screen position."""
        settings = settings or DEFAULT_SETTINGS
        scale = settings.scale_render
        tile = settings.tile_size_render
        sx = self.hitbox.x * scale
        sy = self.hitbox.y * scale
        outside = (
            sx < screen.x - tile
            or sx > screen.x + screen.w
            or sy < screen.y - tile
            or sy > screen.y + screen.h
        )
        if outside:
            return False
        self.position_screen = settings.to_screen(screen, self.position())
        return True

    def add_animation(self, animation: Playable, checkers: Iterable[tuple[str, Any]]) -> None:
        """Register an animation played while every (property, value) pair holds."""
        tests = [self.properties.get_checker(name, value) for name, value in checkers]
        self._animations.append(AnimationHelper(animation, tests))

    def has_animation(self) -> bool:
        return bool(self._animations)

    def set_animation(self) -> None:
        """Switch to the first animation whose conditions hold."""
        for helper in self._animations:
            if helper():
                if self._current_animation is helper.animation:
                    return
                if self._current_animation is not None:
                    self._current_animation.stop()
                self._current_animation = helper.animation
                self._current_animation.play()
                break