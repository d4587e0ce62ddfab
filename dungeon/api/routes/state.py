"""GET /api/v1/state — turn, run state, visible actors, recent events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query

from dungeon.api.dependencies import get_session_manager
from dungeon.api.schemas import ActorSchema, EventSchema, StateResponse
from dungeon.api.session_manager import SessionManager
from dungeon.core.models import Actor
from dungeon.utils.event_log import GameEvent

if TYPE_CHECKING:
    from dungeon.engine.game_loop import GameLoop

router = APIRouter()


def actor_schema(actor: Actor) -> ActorSchema:
    return ActorSchema(
        id=actor.id,
        name=actor.name,
        x=actor.pos.x,
        y=actor.pos.y,
        glyph=actor.glyph,
        fg=actor.fg,
        bg=actor.bg,
        is_player=actor.is_player,
        is_monster=actor.is_monster,
        blocks_tile=actor.blocks_tile,
        vision_range=actor.viewshed.range if actor.viewshed else 0,
    )


def event_schema(event: GameEvent) -> EventSchema:
    return EventSchema(
        turn=event.turn,
        category=event.category,
        message=event.message,
        actor_ids=list(event.actor_ids),
    )


@router.get("/state", response_model=StateResponse)
def get_state(
    events: int = Query(20, ge=0, le=500, description="Number of recent events to include"),
    manager: SessionManager = Depends(get_session_manager),
) -> StateResponse:
    def build(loop: GameLoop) -> StateResponse:
        world = loop.world
        gm = world.game_map
        player = world.player
        shown = [
            actor_schema(a) for a in world.actors.values()
            if gm.pos_idx(a.pos) in gm.visible_tiles
        ]
        return StateResponse(
            turn=world.turn,
            runstate=loop.runstate.name,
            player=actor_schema(player) if player else None,
            actors=shown,
            events=[event_schema(e) for e in manager.event_log.latest(events)],
        )

    return manager.read(build)
