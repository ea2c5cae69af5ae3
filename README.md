# arenakit

Game logic for tile-based 2D arena games, in pure Python with no
dependencies. The package covers the state and rules a game loop needs:

- `arenakit.geometry`: `Rect` (intersection and centre), `Color`,
  `TileSettings` (input, physics and render tile sizes), `Viewport` with its
  `Position` layouts, and `reduce_to_zero`.
- `arenakit.block`: `Block` tiles, a `Properties` store of named values, and
  animation selection driven by property checkers (`add_animation`,
  `set_animation`).
- `arenakit.objects`: `GameObject` with health, top-down or side-scroll
  movement (`MoveType`), collision resolution with sliding and bounce, path
  following, `kick` and `push`, and facing (`Direction`, `dir_name`).
- `arenakit.button`: `Button` hover and click state, driven by `MouseEvent`s
  and the mouse position.
- `arenakit.damage`: `Damager`, `AreaDamager`, a millisecond `Timer` and
  `DamagerInstance` for per-character delays and cooldowns.
- `arenakit.character`: `Character` with named attacks
  (`evaluate_attack`, `evaluate_attack_at`), plus movement callbacks such as
  `player_move_left` and `player_jump_up`.
- `arenakit.keybinds`: `KeyBinds`, which maps `KeyEvent`s to callbacks by
  named binding.
- `arenakit.object_manager`: `ObjectManager`, a named registry that creates
  objects through a factory and removes dead ones when `clean()` is called.
- `arenakit.tilemap`: `TileMap`, which loads text tile maps, provides the
  border blocks, computes the camera rectangle (`screen_position`) and the
  minimap rectangles (`minimap_rects`).
- `arenakit.preset`: the standard `AnimationData` set from
  `get_animation_data`.
- `arenakit.framerate`: `FramerateManager`, a fixed-rate frame limiter with a
  pluggable clock and sleep function.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from arenakit.character import Character, player_move_right
from arenakit.keybinds import KeyBinds, KeyEvent, KeyEventType
from arenakit.objects import GameObject

hero = Character(0, 0)
binds = KeyBinds()
binds.add_keybind("right", ord("d"), player_move_right(hero), None)
binds.evaluate(KeyEvent(KeyEventType.KEY_DOWN, ord("d")))

wall = GameObject(100, 0)
hero.move([wall], 0.1)
print(hero.hitbox.x, hero.dir_name())  # 6 RIGHT
```

## Tile maps

A map file holds whitespace-separated two-letter tile codes, one per tile,
filled row by row. The code `00` marks an empty cell. Call
`TileMap.init(x_max, y_max)` first to register the codes `aa`, `ab`, … for a
sprite sheet of that size. Then call `load_map(path, size_x, size_y)`; if
`path` is an empty string, the map is filled with `aa` tiles. An unreadable
file raises `OSError`, an unknown code raises `KeyError`, and a file that ends
early is logged and yields the tiles read so far.

## What it does not do

arenakit draws nothing and opens no window. It does not load images, fonts or
text, play animations, read input devices, or run a game loop or screens.
Objects hold an `image` attribute and animations are any object with `play()`
and `stop()`; rendering them is up to the caller. `TileMap.minimap_rects`
and `Viewport.compute` return rectangles to draw rather than drawing them.