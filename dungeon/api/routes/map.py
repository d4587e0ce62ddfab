"""GET /api/v1/map — tile layout and the player's visibility flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_session_manager
from dungeon.api.schemas import MapResponse
from dungeon.api.session_manager import SessionManager
from dungeon.core.enums import TileType

if TYPE_CHECKING:
    from dungeon.engine.game_loop import GameLoop

router = APIRouter()


def rle_encode(tiles: list[TileType]) -> list[int]:
    """Encode as [value, count, value, count, ...]."""
    rle: list[int] = []
    if not tiles:
        return rle
    cur_val = int(tiles[0])
    cur_count = 1
    for tile in tiles[1:]:
        v = int(tile)
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: SessionManager = Depends(get_session_manager)) -> MapResponse:
    def build(loop: GameLoop) -> MapResponse:
        gm = loop.world.game_map
        return MapResponse(
            width=gm.width,
            height=gm.height,
            grid=rle_encode(gm.tiles),
            rooms=[[r.x1, r.y1, r.x2, r.y2] for r in gm.rooms],
            revealed=sorted(gm.revealed_tiles),
            visible=sorted(gm.visible_tiles),
        )

    return manager.read(build)
