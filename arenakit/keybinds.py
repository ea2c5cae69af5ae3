"""Named key bindings that run actions on key press and release."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Hashable

Action = Callable[[], None]


class KeyEventType(Enum):
    KEY_DOWN = auto()
    KEY_UP = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A keyboard event; repeat is non-zero for auto-repeated presses."""

    type: KeyEventType
    key: Hashable = None
    repeat: int = 0


@dataclass
class KeyBind:
    key: Hashable
    func_down: Action | None
    func_up: Action | None = None


class KeyBinds:
    """A set of bindings, each known by a unique name."""

    def __init__(self) -> None:
        self._binds: dict[str, KeyBind] = {}

    def add_keybind(
        self,
        name: str,
        key: Hashable,
        func_down: Action | None,
        func_up: Action | None = None,
    ) -> None:
        """Add a binding; raise ValueError if the name is taken."""
        if name in self._binds:
            raise ValueError(f"Keybind of name {name} already exists in the manager.")
        self._binds[name] = KeyBind(key, func_down, func_up)

    def change_keybind(self, name: str, key: Hashable) -> None:
        """Rebind an existing binding to another key; raise KeyError if it is unknown."""
        self._binds[name].key = key

    def __contains__(self, name: object) -> bool:
        return name in self._binds

    def __getitem__(self, name: str) -> KeyBind:
        return self._binds[name]

    def evaluate(self, event: KeyEvent) -> None:
        """Run the actions bound to the event's key, in order of binding name."""
        if event.repeat != 0:
            return
        if event.type is KeyEventType.KEY_DOWN:
            pick = lambda bind: bind.func_down  # noqa: E731
        elif event.type is KeyEventType.KEY_UP:
            pick = lambda bind: bind.func_up  # noqa: E731
        else:
            return
        for name in sorted(self._binds):
            bind = self._binds[name]
            if bind.key == event.key:
                action = pick(bind)
                if action:
                    action()