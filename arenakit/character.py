"""Characters that own attacks, and key actions that move a player."""

from __future__ import annotations

import copy
from typing import Callable, Sequence

from arenakit.block import Block
from arenakit.damage import DamagerInstance
from arenakit.geometry import Rect, TileSettings
from arenakit.objects import Direction, GameObject

Action = Callable[[], None]


class Character(GameObject):
    """A game object with named attacks."""

    def __init__(self, x: int = 0, y: int = 0, settings: TileSettings | None = None) -> None:
        super().__init__(x, y, settings)
        self.dmgr_insts: dict[str, DamagerInstance] = {}

    def __copy__(self) -> Character:
        clone = GameObject.__copy__(self)
        clone.dmgr_insts = {name: copy.copy(inst) for name, inst in self.dmgr_insts.items()}
        return clone

    def evaluate_attack(self, name: str, targets: Sequence[GameObject]) -> bool:
        """Perform the named attack if it is active and ready; tell whether it happened."""
        inst = self.dmgr_insts.get(name)
        if inst is None:
            return False
        return bool(
            inst.do_attack
            and inst.check_cooldown()
            and inst.dmgr.evaluate_character(self, targets)
        )

    def evaluate_attack_at(
        self,
        name: str,
        origin: Rect,
        direction: Direction | Rect,
        targets: Sequence[GameObject],
    ) -> bool:
        """Perform the named attack from origin toward direction if active and ready."""
        inst = self.dmgr_insts.get(name)
        if inst is None:
            return False
        return bool(
            inst.do_attack
            and inst.check_cooldown()
            and inst.dmgr.evaluate_at(origin, direction, targets)
        )


def player_move_up(player: GameObject) -> Action:
    return lambda: player.move_up([])


def player_jump_up(player: GameObject, collision_objects: Sequence[Block]) -> Action:
    return lambda: player.move_up(collision_objects)


def player_move_down(player: GameObject) -> Action:
    return lambda: player.move_down()


def player_move_left(player: GameObject) -> Action:
    return lambda: player.move_left()


def player_move_right(player: GameObject) -> Action:
    return lambda: player.move_right()