"""Damage dealers, attack zones and per-character cooldown tracking."""

from __future__ import annotations

import time
from typing import Callable, Sequence

from arenakit.geometry import DEFAULT_SETTINGS, Rect, TileSettings
from arenakit.objects import Direction, GameObject

Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Damager:
    """A kind of attack: how much damage it does, its cooldown, knockback and lifesteal."""

    def __init__(self, damage: int) -> None:
        self.damage = damage
        self.lifesteal = 0.0
        self.cooldown = 1.0
        self.delay = 0.0
        self.hits = 0
        self.knockback = 0.0

    def deal_damage(self, target: GameObject) -> None:
        """Count a hit and take damage off the target's health."""
        self.hits += 1
        target.modify_health(-self.damage)

    def knock_back(self, target: GameObject, origin: Rect) -> None:
        """Push the target away from origin by the knockback strength."""
        target.kick(origin, self.knockback)

    def evaluate_character(self, attacker: GameObject, targets: Sequence[GameObject]) -> bool:
        """Attack on behalf of a character; this kind of damager does nothing."""
        return False

    def evaluate_at(
        self, origin: Rect, direction: Direction | Rect, targets: Sequence[GameObject]
    ) -> bool:
        """Attack at a location; this kind of damager does nothing."""
        return False


class AreaDamager(Damager):
    """Hits everything inside a rectangle placed in front of the attacker."""

    def __init__(
        self,
        damage: int,
        shift: float = 0.5,
        length: float = 1,
        width: float = 3,
        settings: TileSettings | None = None,
    ) -> None:
        super().__init__(damage)
        self.shift = shift
        self.length = length
        self.width = width
        self.settings = settings or DEFAULT_SETTINGS

    def __copy__(self) -> AreaDamager:
        return type(self)(self.damage, self.shift, self.length, self.width, self.settings)

    def target_zone(self, origin: Rect, direction: Direction | int) -> Rect:
        """The rectangle hit by an attack from origin facing direction."""
        tile = self.settings.tile_size_physics
        half_width = self.width / 2
        half_length = self.length / 2
        across = int(self.width * tile)
        along = int(self.length * tile)
        match Direction(direction):
            case Direction.UP:
                return Rect(
                    int(origin.x - half_width * tile),
                    int(origin.y - (self.shift + half_length) * tile),
                    across,
                    along,
                )
            case Direction.DOWN:
                return Rect(
                    int(origin.x - half_width * tile),
                    int(origin.y + (self.shift - half_length) * tile),
                    across,
                    along,
                )
            case Direction.LEFT:
                return Rect(
                    int(origin.x - (self.shift + half_length) * tile),
                    int(origin.y - half_width * tile),
                    along,
                    across,
                )
            case _:
                return Rect(
                    int(origin.x + (self.shift - half_length) * tile),
                    int(origin.y - half_width * tile),
                    along,
                    across,
                )

    def evaluate_target(self, zone: Rect, origin: Rect, target: GameObject) -> bool:
        """Damage (and knock back) the target if it overlaps zone; tell whether it did."""
        if not zone.intersects(target.hitbox):
            return False
        self.deal_damage(target)
        if self.knockback:
            self.knock_back(target, origin)
        return True

    def evaluate_character(self, attacker: GameObject, targets: Sequence[GameObject]) -> bool:
        """Attack in the attacker's facing direction, healing it by lifesteal."""
        self.hits = 0
        zone = self.target_zone(attacker.position(), attacker.direction)
        for target in targets:
            if target.dead or target is attacker:
                continue
            self.evaluate_target(zone, attacker.hitbox, target)
        if self.lifesteal:
            attacker.modify_health(int(self.damage * self.lifesteal * self.hits))
        return True

    def evaluate_at(
        self, origin: Rect, direction: Direction | Rect, targets: Sequence[GameObject]
    ) -> bool:
        """Attack from a location in one of the four directions."""
        if isinstance(direction, Rect):
            return super().evaluate_at(origin, direction, targets)
        self.hits = 0
        zone = self.target_zone(origin, direction)
        for target in targets:
            if target.dead:
                continue
            self.evaluate_target(zone, origin, target)
        return True


class Timer:
    """A millisecond stopwatch driven by a clock returning milliseconds."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _monotonic_ms
        self._start = 0.0
        self.is_started = False

    def start(self) -> None:
        self._start = self._clock()
        self.is_started = True

    def stop(self) -> None:
        self.is_started = False
        self._start = 0.0

    def restart(self) -> None:
        self.stop()
        self.start()

    def ticks(self) -> float:
        """Milliseconds since start, or 0 when stopped."""
        if not self.is_started:
            return 0
        return self._clock() - self._start


class DamagerInstance:
    """A character's use of a damager, tracking its own delay and cooldown."""

    def __init__(self, damager: Damager, clock: Clock | None = None) -> None:
        self.dmgr = damager
        self.do_attack = False
        self._clock = clock
        self._cd_clock = Timer(clock)
        self._delay_clock = Timer(clock)
        if damager.delay:
            self._delay_clock.start()

    def __copy__(self) -> DamagerInstance:
        return type(self)(self.dmgr, self._clock)

    def check_cooldown(self, restart: bool = True) -> bool:
        """Tell whether the attack is ready; when it is, optionally restart the cooldown."""
        if self._delay_clock.is_started and self._delay_clock.ticks() < self.dmgr.delay * 1000:
            return False
        self._delay_clock.stop()
        if self._cd_clock.is_started and self._cd_clock.ticks() < self.dmgr.cooldown * 1000:
            return False
        if restart:
            self._cd_clock.restart()
        return True

    def cooldown_fraction(self) -> float:
        """Fraction of the cooldown already elapsed; 1 when ready."""
        total = self.dmgr.cooldown * 1000
        if self._cd_clock.is_started and self._cd_clock.ticks() < total:
            return self._cd_clock.ticks() / total
        return 1.0