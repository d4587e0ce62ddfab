"""Map inspection helpers shared by generator and pipeline tests."""

from __future__ import annotations

from collections import deque

from dungeon.core.enums import TileType
from dungeon.core.game_map import GameMap
from dungeon.core.models import Vector2


def reachable_floor(game_map: GameMap, start: Vector2) -> set[int]:
    """Flood-fill over FLOOR tiles (4-connected) from *start*."""
    start_idx = game_map.pos_idx(start)
    if game_map.tiles[start_idx] != TileType.FLOOR:
        return set()
    seen = {start_idx}
    queue: deque[Vector2] = deque([start])
    while queue:
        pos = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            npos = Vector2(pos.x + dx, pos.y + dy)
            if not game_map.in_bounds(npos):
                continue
            i = game_map.pos_idx(npos)
            if i in seen or game_map.tiles[i] != TileType.FLOOR:
                continue
            seen.add(i)
            queue.append(npos)
    return seen


def floor_indices(game_map: GameMap) -> set[int]:
    return {i for i, t in enumerate(game_map.tiles) if t == TileType.FLOOR}


def expected_floor(game_map: GameMap) -> set[int]:
    """Room interiors plus recorded corridor tiles."""
    tiles: set[int] = set()
    for room in game_map.rooms:
        tiles.update(game_map.idx(x, y) for x, y in room.inner_tiles())
    for corridor in game_map.corridors:
        tiles.update(corridor)
    return tiles
