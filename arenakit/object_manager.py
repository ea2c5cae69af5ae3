"""A named collection of game objects that owns them and drops the dead."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from arenakit.geometry import DEFAULT_SETTINGS, TileSettings
from arenakit.objects import GameObject

T = TypeVar("T", bound=GameObject)


class ObjectManager(Generic[T]):
    """Objects created by a factory and kept by unique name in insertion order."""

    def __init__(
        self,
        factory: Callable[..., T] = GameObject,
        settings: TileSettings | None = None,
    ) -> None:
        self._factory = factory
        self.settings = settings or DEFAULT_SETTINGS
        self._objects: dict[str, T] = {}

    def add(self, name: str, x: float, y: float) -> T:
        """Create an object; float coordinates are in tiles, int ones in physics units.

        Raise ValueError if the name is already taken.
        """
        if name in self._objects:
            raise ValueError(f"Object of name {name} already exists in the manager.")
        if isinstance(x, float) or isinstance(y, float):
            tile = self.settings.tile_size_physics
            x = int(x) * tile
            y = int(y) * tile
        obj = self._factory(int(x), int(y), self.settings)
        self._objects[name] = obj
        return obj

    def get(self, name: str) -> T:
        """Return the named object; raise KeyError if there is none."""
        try:
            return self._objects[name]
        except KeyError:
            raise KeyError(f"Object of name {name} does not exist in the manager.") from None

    def __getitem__(self, name: str) -> T:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._objects.values()))

    def all(self) -> list[T]:
        """All objects in the order they were added."""
        return list(self._objects.values())

    def clean(self) -> None:
        """Remove every dead object."""
        self._objects = {name: obj for name, obj in self._objects.items() if not obj.dead}