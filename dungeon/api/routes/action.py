"""POST /api/v1/action/{action} — one player action, then one turn."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_session_manager
from dungeon.api.routes.state import event_schema
from dungeon.api.schemas import ActionResponse
from dungeon.api.session_manager import SessionManager
from dungeon.core.enums import PlayerAction

router = APIRouter()


class ActionName(str, Enum):
    wait = "wait"
    north = "north"
    east = "east"
    south = "south"
    west = "west"


_ACTIONS: dict[ActionName, PlayerAction] = {
    ActionName.wait: PlayerAction.WAIT,
    ActionName.north: PlayerAction.MOVE_NORTH,
    ActionName.east: PlayerAction.MOVE_EAST,
    ActionName.south: PlayerAction.MOVE_SOUTH,
    ActionName.west: PlayerAction.MOVE_WEST,
}


@router.post("/action/{action}", response_model=ActionResponse)
def act(
    action: ActionName,
    manager: SessionManager = Depends(get_session_manager),
) -> ActionResponse:
    turn, events = manager.play(_ACTIONS[action])
    return ActionResponse(
        status="ok",
        message=f"{action.value} applied.",
        turn=turn,
        events=[event_schema(e) for e in events],
    )


@router.post("/reset", response_model=ActionResponse)
def reset(manager: SessionManager = Depends(get_session_manager)) -> ActionResponse:
    turn = manager.reset()
    return ActionResponse(status="ok", message="Session reset.", turn=turn)
