"""Game logic for tile-based 2D arena games: geometry, blocks, moving objects, buttons, damage, keybinds, tile maps, animation presets and frame-rate limiting."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "block",
    "framerate",
    "objects",
    "button",
    "damage",
    "character",
    "keybinds",
    "object_manager",
    "tilemap",
    "preset",
]