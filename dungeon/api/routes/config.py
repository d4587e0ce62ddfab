"""GET /api/v1/config — expose dungeon configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_session_manager
from dungeon.api.schemas import DungeonConfigResponse
from dungeon.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=DungeonConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> DungeonConfigResponse:
    cfg = manager.config
    return DungeonConfigResponse(
        world_seed=cfg.world_seed,
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        max_rooms=cfg.max_rooms,
        min_room_size=cfg.min_room_size,
        max_room_size=cfg.max_room_size,
        room_margin=cfg.room_margin,
        vision_range=cfg.vision_range,
    )
