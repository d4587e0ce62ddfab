"""GET /api/v1/events: the message log, filterable by turn and actor."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from dungeon.api.dependencies import get_session_manager
from dungeon.api.routes.state import event_schema
from dungeon.api.schemas import EventSchema
from dungeon.api.session_manager import SessionManager

router = APIRouter()


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since: int | None = Query(None, ge=0, description="Only events from this turn on"),
    actor: int | None = Query(None, description="Only events involving this actor id"),
    limit: int = Query(100, ge=1, le=500),
    manager: SessionManager = Depends(get_session_manager),
) -> list[EventSchema]:
    lines = manager.event_log.query(since_turn=since, actor_id=actor, limit=limit)
    return [event_schema(e) for e in lines]
