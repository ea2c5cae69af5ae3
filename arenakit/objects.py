"""Movable objects with health, velocities, collisions and path following."""

from __future__ import annotations

import copy
import math
from enum import Enum, IntEnum
from typing import Any, Sequence

from arenakit.block import Block
from arenakit.geometry import DEFAULT_SETTINGS, Rect, TileSettings, reduce_to_zero


class Direction(IntEnum):
    """Facing of an object."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class MoveType(Enum):
    """How an object moves: freely in four directions, or sideways with jumps."""

    TOP_DOWN = "top_down"
    SIDESCROLL = "sidescroll"


def _stored(name: str) -> property:
    """An attribute kept in the object's property store under ``name``."""

    def getter(self: GameObject) -> Any:
        return self.properties.get(name)

    def setter(self: GameObject, value: Any) -> None:
        self.properties.set(name, value)

    return property(getter, setter, doc=f"The {name!r} property.")


class GameObject(Block):
    """A block that moves, collides, has health and can be pushed around."""

    health = _stored("health")
    max_health = _stored("max_health")
    dead = _stored("dead")
    moved = _stored("moved")
    bounced = _stored("bounced")
    direction = _stored("direction")

    def __init__(self, x: int = 0, y: int = 0, settings: TileSettings | None = None) -> None:
        super().__init__(x, y, settings)
        self._init_motion(settings or DEFAULT_SETTINGS)
        self.health = 0
        self.max_health = 0
        self.dead = False
        self.moved = False
        self.bounced = False
        self.direction = int(Direction.UP)

    def _init_motion(self, settings: TileSettings) -> None:
        self.settings = settings
        self.move_type = MoveType.TOP_DOWN
        self.path: list[Block] = []
        self.target: GameObject | None = None
        self.intr_vel_x = 0.0
        self.intr_vel_y = 0.0
        self.speed_x = 4.0
        self.speed_y = 4.0
        self.ext_vel_x = 0.0
        self.ext_vel_y = 0.0
        self.friction_x = 4.0
        self.friction_y = 4.0
        self.bounce_factor = 0.0
        self.do_plot_path = False

    def __copy__(self) -> GameObject:
        clone = Block.__copy__(self)
        clone._init_motion(self.settings)
        clone.move_type = self.move_type
        clone.speed_x = self.speed_x
        clone.speed_y = self.speed_y
        clone.bounce_factor = self.bounce_factor
        clone.do_plot_path = self.do_plot_path
        clone.target = self.target
        clone.properties = copy.copy(self.properties)
        return clone

    # Health

    def set_health(self, value: int) -> None:
        """Set both the current and the maximum health."""
        self.health = value
        self.max_health = value

    def modify_health(self, value: int) -> None:
        """Change health by value, clamped to [0, max_health]; zero health kills."""
        if "health" not in self.properties:
            return
        health = self.health + value
        health = min(health, self.max_health)
        health = max(health, 0)
        self.health = health
        if health == 0:
            self.dead = True

    # Movement

    def move_left(self) -> None:
        self.intr_vel_x -= self.speed_x

    def move_right(self) -> None:
        self.intr_vel_x += self.speed_x

    def move_up(self, coll_objects: Sequence[Block]) -> None:
        """Move up, or jump when sidescrolling and standing on something."""
        if self.move_type is MoveType.SIDESCROLL:
            if self.next_to(self.hitbox, Direction.DOWN, coll_objects):
                self.ext_vel_y -= self.speed_y
        else:
            self.intr_vel_y -= self.speed_y

    def move_down(self) -> None:
        if self.move_type is MoveType.TOP_DOWN:
            self.intr_vel_y += self.speed_y

    def set_movetype(self, move_type: MoveType) -> None:
        """Switch movement style and adjust vertical speed and friction to match."""
        self.move_type = move_type
        if move_type is MoveType.SIDESCROLL:
            self.friction_y = 0.0
            self.speed_y = 16.0
        else:
            self.friction_y = self.friction_x
            self.speed_y = self.speed_x

    def follow_path(self, coll_objects: Sequence[Block]) -> None:
        """Steer toward the last block of the path, dropping it once reached."""
        self.intr_vel_x = 0.0
        self.intr_vel_y = 0.0
        if not self.path:
            return
        goal = self.path[-1]
        dir_x = goal.hitbox.x - self.hitbox.x
        dir_y = goal.hitbox.y - self.hitbox.y
        if dir_x > 0:
            self.move_right()
        elif dir_x < 0:
            self.move_left()
        if dir_y > 0:
            self.move_down()
        elif dir_y < 0:
            self.move_up(coll_objects)

        tile = self.settings.tile_size_physics
        if abs(dir_x) <= tile and abs(dir_y) <= tile and len(self.path) > 1:
            self.path.pop()

    def _update_direction(self) -> None:
        if self.intr_vel_x > 0:
            self.direction = int(Direction.RIGHT)
        elif self.intr_vel_x < 0:
            self.direction = int(Direction.LEFT)
        elif self.intr_vel_y > 0:
            self.direction = int(Direction.DOWN)
        elif self.intr_vel_y < 0:
            self.direction = int(Direction.UP)

    def _shifted(self, dx: int, dy: int) -> Rect:
        h = self.hitbox
        return Rect(h.x + dx, h.y + dy, h.w, h.h)

    def move(self, coll_objects: Sequence[Block], delta_t: float) -> None:
        """Advance by the current velocities, sliding and bouncing off obstacles."""
        self.ext_vel_x = reduce_to_zero(self.ext_vel_x, self.friction_x * delta_t)
        self.ext_vel_y = reduce_to_zero(self.ext_vel_y, self.friction_y * delta_t)
        tile = self.settings.tile_size_physics
        dx = int((self.ext_vel_x + self.intr_vel_x) * tile * delta_t)
        dy = int((self.ext_vel_y + self.intr_vel_y) * tile * delta_t)

        self.moved = False
        self.bounced = False
        self._update_direction()
        walking = bool(self.intr_vel_x or self.intr_vel_y)

        while dx or dy:
            candidate = self._shifted(dx, dy)
            if not self.does_collide(candidate, coll_objects):
                self.hitbox = candidate
                self.moved = walking
                return

            dx2, dy2 = dx, dy
            success_x = success_y = False
            while dx2:
                dx2 = reduce_to_zero(dx2, 1)
                if not self.does_collide(self._shifted(dx2, dy), coll_objects):
                    success_x = True
                    break
            while dy2:
                dy2 = reduce_to_zero(dy2, 1)
                if not self.does_collide(self._shifted(dx, dy2), coll_objects):
                    success_y = True
                    break

            if not success_x and not success_y:
                dx = reduce_to_zero(dx, 1)
                dy = reduce_to_zero(dy, 1)

            if success_y and (not success_x or abs(dy2 - dy) < abs(dx2 - dx)):
                self.hitbox = self._shifted(dx, dy2)
                self.moved = walking
                self.bounced = True
                self.ext_vel_x = self.bounce_factor * self.ext_vel_x
                self.ext_vel_y = -self.bounce_factor * self.ext_vel_y
                return
            if success_x and (not success_y or abs(dy2 - dy) >= abs(dx2 - dx)):
                self.hitbox = self._shifted(dx2, dy)
                self.moved = walking
                self.bounced = True
                self.ext_vel_x = -self.bounce_factor * self.ext_vel_x
                self.ext_vel_y = self.bounce_factor * self.ext_vel_y
                return

        # Nothing worked: most likely stuck inside another object.
        self.ext_vel_x = 0.0
        self.ext_vel_y = 0.0

    def does_collide(self, pos: Rect, coll_objects: Sequence[Block]) -> bool:
        """Tell whether pos overlaps any of the objects other than self."""
        return any(obj is not self and obj.hitbox.intersects(pos) for obj in coll_objects)

    def next_to(self, pos: Rect, direction: Direction, coll_objects: Sequence[Block]) -> bool:
        """Tell whether pos, moved by one unit in direction, touches an object."""
        probe = Rect(pos.x, pos.y, pos.w, pos.h)
        match Direction(direction):
            case Direction.UP:
                probe.y -= 1
            case Direction.DOWN:
                probe.y += 1
            case Direction.LEFT:
                probe.x -= 1
            case Direction.RIGHT:
                probe.x += 1
        return self.does_collide(probe, coll_objects)

    def kick(self, origin: Rect, multiplier: float) -> None:
        """Add velocity of size multiplier pointing away from origin."""
        centre = self.position()
        dir_x = float(centre.x - origin.x)
        dir_y = float(centre.y - origin.y)
        length = math.hypot(dir_x, dir_y)
        if length == 0:
            return
        self.ext_vel_x += multiplier * dir_x / length
        self.ext_vel_y += multiplier * dir_y / length

    def push(self, dax: float, day: float) -> None:
        """Add to the external velocity directly."""
        self.ext_vel_x += dax
        self.ext_vel_y += day

    def dir_name(self) -> str:
        return Direction(self.direction).name