"""Tile map with per-tile visibility, blocking and occupancy state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon.core.enums import TileType
from dungeon.core.models import Vector2

if TYPE_CHECKING:
    from dungeon.core.rect import Rect


class MapBoundsError(IndexError):
    """A coordinate outside the map reached code that indexes tiles."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) outside {width}x{height} map")
        self.x = x
        self.y = y


class GameMap:
    """2D tile grid backed by flat row-major lists.

    ``idx(x, y) = y * width + x`` is the only coordinate/index conversion.
    Geometry (tiles, rooms) is fixed after generation; the flag sets and the
    blocking/occupancy index are mutated in place every turn.
    """

    __slots__ = (
        "width",
        "height",
        "tiles",
        "rooms",
        "corridors",
        "revealed_tiles",
        "visible_tiles",
        "blocked",
        "tile_content",
    )

    def __init__(self, width: int, height: int, fill: TileType = TileType.WALL) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        size = width * height
        self.tiles: list[TileType] = [fill] * size
        self.rooms: list[Rect] = []
        self.corridors: list[tuple[int, ...]] = []
        self.revealed_tiles: set[int] = set()
        self.visible_tiles: set[int] = set()
        self.blocked: list[bool] = [fill == TileType.WALL] * size
        self.tile_content: dict[int, set[int]] = {}

    # -- indexing --

    def idx(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MapBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    def pos_idx(self, pos: Vector2) -> int:
        return self.idx(pos.x, pos.y)

    def xy(self, index: int) -> Vector2:
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"Tile index {index} outside map of {len(self.tiles)} tiles")
        return Vector2(index % self.width, index // self.width)

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def in_bounds_xy(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # -- tiles --

    def get_xy(self, x: int, y: int) -> TileType:
        return self.tiles[self.idx(x, y)]

    def set_xy(self, x: int, y: int, tile: TileType) -> None:
        self.tiles[self.idx(x, y)] = tile

    def is_opaque_xy(self, x: int, y: int) -> bool:
        """Walls block sight; so does everything beyond the map edge."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.tiles[y * self.width + x] == TileType.WALL
        return True

    def is_walkable(self, pos: Vector2) -> bool:
        return self.in_bounds(pos) and self.tiles[pos.y * self.width + pos.x] == TileType.FLOOR

    def floor_count(self) -> int:
        return sum(1 for t in self.tiles if t == TileType.FLOOR)

    # -- blocking / occupancy --

    def populate_blocked(self) -> None:
        """Reset ``blocked`` to the static wall layout."""
        self.blocked = [t == TileType.WALL for t in self.tiles]

    def is_blocked(self, pos: Vector2) -> bool:
        return self.blocked[self.pos_idx(pos)]

    def actors_at(self, pos: Vector2) -> frozenset[int]:
        return frozenset(self.tile_content.get(self.pos_idx(pos), ()))

    # -- visibility flags --

    def is_revealed(self, pos: Vector2) -> bool:
        return self.pos_idx(pos) in self.revealed_tiles

    def is_visible(self, pos: Vector2) -> bool:
        return self.pos_idx(pos) in self.visible_tiles
