"""Rooms-and-corridors map generator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from dungeon.core.enums import Domain, TileType
from dungeon.core.game_map import GameMap
from dungeon.core.models import Vector2
from dungeon.core.rect import Rect

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# RNG slots per placement sample: width, height, x, y
_SLOT_W = 0
_SLOT_H = 1
_SLOT_X = 2
_SLOT_Y = 3
_SLOTS_PER_SAMPLE = 4

# Corridor coin flips live under their own key range
_CORRIDOR_KEY_BASE = 1_000_000


class MapGenerator:
    """Places non-overlapping rooms and joins successive rooms with L-shaped corridors."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        if config.map_width < 3 or config.map_height < 3:
            raise ValueError(
                f"Map must be at least 3x3, got {config.map_width}x{config.map_height}"
            )
        if config.min_room_size < 1 or config.min_room_size > config.max_room_size:
            raise ValueError(
                f"Invalid room size range [{config.min_room_size}, {config.max_room_size}]"
            )
        if config.max_rooms < 0:
            raise ValueError(f"max_rooms must be >= 0, got {config.max_rooms}")
        self._config = config
        self._rng = rng

    def generate(self) -> GameMap:
        """Build a fresh map. Always contains at least one room."""
        cfg = self._config
        game_map = GameMap(cfg.map_width, cfg.map_height)

        for attempt in range(cfg.max_rooms):
            room = self._sample_room(attempt, game_map.rooms)
            if room is not None:
                self._add_room(game_map, room)

        if not game_map.rooms:
            room = self._fallback_room()
            logger.warning("No room could be placed after %d attempts; forcing %s", cfg.max_rooms, room)
            self._add_room(game_map, room)

        game_map.populate_blocked()
        logger.info(
            "Generated %dx%d map: %d rooms, %d floor tiles (seed=%d)",
            game_map.width, game_map.height, len(game_map.rooms),
            game_map.floor_count(), self._rng.seed,
        )
        return game_map

    def build_from_rooms(self, rooms: Sequence[Rect]) -> GameMap:
        """Carve an explicit room list, connecting each room to the previous one."""
        if not rooms:
            raise ValueError("At least one room is required")
        cfg = self._config
        game_map = GameMap(cfg.map_width, cfg.map_height)
        for room in rooms:
            if room.x1 < 0 or room.y1 < 0 or room.x2 >= cfg.map_width or room.y2 >= cfg.map_height:
                raise ValueError(f"Room {room} does not fit in {cfg.map_width}x{cfg.map_height} map")
            self._add_room(game_map, room)
        game_map.populate_blocked()
        return game_map

    # -- placement --

    def _sample_room(self, attempt: int, accepted: Sequence[Rect]) -> Rect | None:
        cfg = self._config
        rng = self._rng
        # x in [0, width - w - 2] keeps the right wall column inside the map
        max_w = min(cfg.max_room_size, cfg.map_width - 3)
        max_h = min(cfg.max_room_size, cfg.map_height - 3)
        if max_w < cfg.min_room_size or max_h < cfg.min_room_size:
            return None

        for retry in range(max(1, cfg.placement_retries)):
            base = retry * _SLOTS_PER_SAMPLE
            w = rng.next_int(Domain.MAP_GEN, attempt, base + _SLOT_W, cfg.min_room_size, max_w)
            h = rng.next_int(Domain.MAP_GEN, attempt, base + _SLOT_H, cfg.min_room_size, max_h)
            x = rng.roll_dice(Domain.MAP_GEN, attempt, base + _SLOT_X, 1, cfg.map_width - w - 1) - 1
            y = rng.roll_dice(Domain.MAP_GEN, attempt, base + _SLOT_Y, 1, cfg.map_height - h - 1) - 1
            candidate = Rect.from_size(x, y, w, h)
            if any(candidate.intersects(other, cfg.room_margin) for other in accepted):
                logger.debug("Attempt %d/%d: %s overlaps an existing room", attempt, retry, candidate)
                continue
            return candidate
        return None

    def _fallback_room(self) -> Rect:
        cfg = self._config
        w = max(1, min(cfg.min_room_size, cfg.map_width - 3))
        h = max(1, min(cfg.min_room_size, cfg.map_height - 3))
        x = max(0, (cfg.map_width - w) // 2 - 1)
        y = max(0, (cfg.map_height - h) // 2 - 1)
        return Rect.from_size(x, y, w, h)

    # -- carving --

    def _add_room(self, game_map: GameMap, room: Rect) -> None:
        for x, y in room.inner_tiles():
            game_map.set_xy(x, y, TileType.FLOOR)
        if game_map.rooms:
            prev = game_map.rooms[-1].center()
            corridor = self._carve_corridor(game_map, room.center(), prev, len(game_map.rooms))
            game_map.corridors.append(corridor)
        game_map.rooms.append(room)

    def _carve_corridor(self, game_map: GameMap, new: Vector2, prev: Vector2, key: int) -> tuple[int, ...]:
        if self._rng.next_bool(Domain.MAP_GEN, _CORRIDOR_KEY_BASE + key, 0):
            carved = self._horizontal_tunnel(game_map, prev.x, new.x, prev.y)
            carved += self._vertical_tunnel(game_map, prev.y, new.y, new.x)
        else:
            carved = self._vertical_tunnel(game_map, prev.y, new.y, prev.x)
            carved += self._horizontal_tunnel(game_map, prev.x, new.x, new.y)
        return tuple(carved)

    @staticmethod
    def _horizontal_tunnel(game_map: GameMap, x1: int, x2: int, y: int) -> list[int]:
        y = min(max(y, 0), game_map.height - 1)
        carved: list[int] = []
        for x in range(min(x1, x2), max(x1, x2) + 1):
            x = min(max(x, 0), game_map.width - 1)
            i = game_map.idx(x, y)
            game_map.tiles[i] = TileType.FLOOR
            carved.append(i)
        return carved

    @staticmethod
    def _vertical_tunnel(game_map: GameMap, y1: int, y2: int, x: int) -> list[int]:
        x = min(max(x, 0), game_map.width - 1)
        carved: list[int] = []
        for y in range(min(y1, y2), max(y1, y2) + 1):
            y = min(max(y, 0), game_map.height - 1)
            i = game_map.idx(x, y)
            game_map.tiles[i] = TileType.FLOOR
            carved.append(i)
        return carved
