"""A tile map loaded from text files, with borders, camera and minimap helpers."""

from __future__ import annotations

import logging
from typing import Sequence

from arenakit.block import Block
from arenakit.geometry import DEFAULT_SETTINGS, Color, Rect, TileSettings

_log = logging.getLogger(__name__)

EMPTY_TILE = "00"


def _half(value: int) -> int:
    """Half of an integer, truncated toward zero."""
    return int(value / 2)


def _tile_type(x: int, y: int) -> str:
    return chr(ord("a") + x) + chr(ord("a") + y)


def tile_draw_rect(block: Block, scale: float, settings: TileSettings | None = None) -> Rect:
    """Rectangle of a tile on a map scaled down by scale."""
    tile = (settings or DEFAULT_SETTINGS).tile_size_physics
    return Rect(
        int(block.hitbox.x / scale),
        int(block.hitbox.y / scale),
        int(tile / scale),
        int(tile / scale),
    )


class TileMap:
    """A grid of tiles whose sprite, colour and opacity follow their two-letter type."""

    def __init__(self, border: Rect | None = None, settings: TileSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        if border is None:
            border = Rect(0, 0, self.settings.tile_size_input * 12, 0)
        self.gameplay_border = border
        self.minimap_viewport = Rect()
        self.scale = 1.0
        self.mapping_clips: dict[str, Rect] = {}
        self._mapping_color: dict[str, Color] = {}
        self._mapping_obscure: dict[str, bool] = {}
        self.tiles: list[Block] = []
        self.blocks: list[Block] = []
        self.image = None
        self.n_tile_x = 0
        self.n_tile_y = 0
        self._width = 0
        self._height = 0
        self._border_left = Block(settings=self.settings)
        self._border_right = Block(settings=self.settings)
        self._border_top = Block(settings=self.settings)
        self._border_bottom = Block(settings=self.settings)

    @property
    def width(self) -> int:
        """Map width in physics units."""
        return self._width

    @property
    def height(self) -> int:
        """Map height in physics units."""
        return self._height

    def color_of(self, tile_type: str) -> Color:
        return self._mapping_color[tile_type]

    def obscures(self, tile_type: str) -> bool:
        return self._mapping_obscure[tile_type]

    def init(self, x_max: int, y_max: int) -> None:
        """Register tile types for a sprite sheet of x_max by y_max input tiles."""
        tile = self.settings.tile_size_input
        for x in range(x_max):
            for y in range(y_max):
                kind = _tile_type(x, y)
                self.mapping_clips[kind] = Rect(x * tile, y * tile, tile, tile)
                self._mapping_color[kind] = Color(0, 0, 0, 0)
                self._mapping_obscure[kind] = True

    def load_map(self, map_file: str, size_x: int, size_y: int) -> bool:
        """Load the tiles from map_file, or a blank map if it is empty; tell whether any loaded."""
        tile = self.settings.tile_size_physics
        self._width = size_x * tile
        self._height = size_y * tile
        self._border_left.hitbox = Rect(-tile, -tile, tile, tile * (size_x + 2))
        self._border_right.hitbox = Rect(tile * size_x, -tile, tile, tile * (size_x + 2))
        self._border_top.hitbox = Rect(0, tile * size_y, tile * size_x, tile)
        self._border_bottom.hitbox = Rect(0, -tile, tile * size_x, tile)

        if map_file != "":
            self.tiles = self.import_map(map_file, size_x, size_y)
        else:
            self.tiles = self.blank_map(size_x, size_y)
        return bool(self.tiles)

    def load_blocks(self, map_file: str, size_x: int, size_y: int) -> bool:
        """Load the obstacle layer from map_file; tell whether any blocks loaded."""
        self.blocks = self.import_map(map_file, size_x, size_y)
        return bool(self.blocks)

    def add_sprite_property(
        self, pos_x: int, pos_y: int, color: Color, obscures: bool = True
    ) -> None:
        """Set colour and opacity of the tile at a sprite-sheet position."""
        self.set_sprite_property(_tile_type(pos_x, pos_y), color, obscures)

    def set_sprite_property(self, tile_type: str, color: Color, obscures: bool = True) -> None:
        """Set colour and opacity of a tile type; raise if the type is malformed or unknown."""
        if len(tile_type) != 2:
            raise ValueError("type of sprite has to be string length 2!")
        if tile_type not in self._mapping_color:
            raise KeyError(f"Unknown tile type {tile_type!r}")
        self._mapping_color[tile_type] = color
        self._mapping_obscure[tile_type] = obscures

    def map_border_collision(self) -> list[Block]:
        """The four blocks fencing the map in."""
        return [self._border_left, self._border_right, self._border_top, self._border_bottom]

    def screen_position(self, viewport: Rect, obj: Block) -> Rect:
        """The camera rectangle following obj, kept inside the map; updates obj's screen spot."""
        scale = self.settings.scale_render
        pos = obj.position()
        ps = obj.position_screen
        ps.x = viewport.x + _half(viewport.w)
        ps.y = viewport.y + _half(viewport.h)
        screen = Rect(
            int(pos.x * scale - ps.x),
            int(pos.y * scale - ps.y),
            viewport.w,
            viewport.h,
        )

        right = viewport.x + viewport.w
        map_w = self._width * scale
        if screen.x < 0:
            screen.x = 0
            ps.x = int(pos.x * scale)
        elif screen.x + right > map_w and map_w > right:
            screen.x = int(map_w - right)
            ps.x = int(right - (self._width - pos.x) * scale)

        bottom = viewport.y + viewport.h
        map_h = self._height * scale
        if screen.y < 0:
            screen.y = 0
            ps.y = int(pos.y * scale)
        elif screen.y + bottom > map_h and map_h > bottom:
            screen.y = int(map_h - bottom)
            ps.y = int(bottom - (self._height - pos.y) * scale)

        return screen

    def _make_tile(self, x: int, y: int, kind: str) -> Block:
        block = Block(x, y, self.settings)
        clip = self.mapping_clips[kind]
        block.clip = Rect(clip.x, clip.y, clip.w, clip.h)
        block.map_color = self._mapping_color[kind]
        block.obscures_vision = self._mapping_obscure[kind]
        block.image = self.image
        return block

    def _grid(self, size_x: int, size_y: int):
        """Yield tile origins row by row."""
        self.n_tile_x = size_x
        self.n_tile_y = size_y
        tile = self.settings.tile_size_physics
        for row in range(size_y):
            for col in range(size_x):
                yield col * tile, row * tile

    def blank_map(self, size_x: int, size_y: int) -> list[Block]:
        """A map filled with tiles of type 'aa'."""
        return [self._make_tile(x, y, "aa") for x, y in self._grid(size_x, size_y)]

    def import_map(self, map_file: str, size_x: int, size_y: int) -> list[Block]:
        """Read whitespace-separated tile types; '00' leaves a cell empty.

        Raise OSError if the file cannot be read and KeyError for an unknown type.
        """
        try:
            with open(map_file, encoding="utf-8") as stream:
                tokens = stream.read().split()
        except OSError as exc:
            raise OSError(f"Loading of map file {map_file} failed!") from exc

        output: list[Block] = []
        remaining = iter(tokens)
        for x, y in self._grid(size_x, size_y):
            kind = next(remaining, None)
            if kind is None:
                _log.error("Error loading map: Unexpected end of file!")
                break
            if kind != EMPTY_TILE:
                output.append(self._make_tile(x, y, kind))
        return output

    def minimap_rects(
        self, screen_width: int, objects: Sequence[Block]
    ) -> list[tuple[Rect, Color]]:
        """Rectangles and colours drawing the minimap in the top-right corner."""
        side = self.gameplay_border.w
        self.minimap_viewport = Rect(screen_width - side, 0, side, side)
        self.scale = self._width / self.minimap_viewport.w
        rects = [
            (tile_draw_rect(tile, self.scale, self.settings), tile.map_color)
            for tile in (*self.tiles, *self.blocks)
        ]
        rects.extend(
            (
                Rect(int(obj.hitbox.x / self.scale), int(obj.hitbox.y / self.scale), 2, 2),
                obj.map_color,
            )
            for obj in objects
        )
        return rects