"""Built-in animation layouts for character sprite sheets and effects."""

from __future__ import annotations

from dataclasses import dataclass, field

from arenakit.geometry import Rect


@dataclass
class FloatRect:
    """A rectangle with fractional coordinates, measured in tiles."""

    x: float = 0.0
    y: float = 0.0
    w: float = 1.0
    h: float = 1.0


@dataclass
class AnimationData:
    """How to cut and play an animation from a sprite sheet.

    fclips are in tiles and used when relative is true; clips are in pixels.
    """

    render_mod: FloatRect = field(default_factory=FloatRect)
    frequency: int = 1
    repeat: bool = True
    relative: bool = True
    clips: list[Rect] = field(default_factory=list)
    fclips: list[FloatRect] = field(default_factory=list)


def _frames(*coords: tuple[float, float, float, float]) -> list[FloatRect]:
    return [FloatRect(*c) for c in coords]


def get_animation_data(frames_per_second: int = 60) -> dict[str, AnimationData]:
    """The standard set of character and effect animations."""
    slow = frames_per_second // 2
    fast = frames_per_second // 8
    data: dict[str, AnimationData] = {}

    for name, row in (("DOWN", 0), ("RIGHT", 2), ("UP", 4), ("LEFT", 6)):
        data[f"DEFAULT_{name}"] = AnimationData(
            render_mod=FloatRect(-0.5, -1.25),
            frequency=slow,
            fclips=_frames((0, row, 1, 2), (6, row, 1, 2)),
        )
    for name, row in (("DOWN", 0), ("RIGHT", 2), ("UP", 4), ("LEFT", 6)):
        data[f"WALK_{name}"] = AnimationData(
            render_mod=FloatRect(-0.5, -1.25),
            frequency=fast,
            fclips=_frames(*((col, row, 1, 2) for col in range(4))),
        )
    for name, row in (("DOWN", 8), ("RIGHT", 12), ("UP", 10), ("LEFT", 14)):
        data[f"ATTACK_{name}"] = AnimationData(
            render_mod=FloatRect(-1, -1.25),
            frequency=fast,
            repeat=False,
            fclips=_frames(*((col, row, 2, 2) for col in (0, 2, 4, 6))),
        )

    data["ATTACK"] = AnimationData(
        render_mod=FloatRect(-1, -1, 3, 3),
        repeat=False,
        fclips=_frames(*((col, 0, 1, 1) for col in range(4))),
    )
    data["EXPLOSION"] = AnimationData(
        render_mod=FloatRect(-1.5, -1.5, 3.0 * 16 / 100, 3.0 * 16 / 100),
        repeat=False,
        relative=False,
        clips=[Rect(0, y, 100, 100) for y in range(0, 600, 100)],
    )
    return data