"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MapResponse(BaseModel):
    """Tile layout plus the player's visibility flags.

    ``grid`` is run-length encoded as ``[value, count, value, count, ...]``
    over the row-major tile list (0 = wall, 1 = floor).
    """

    width: int
    height: int
    grid: list[int]
    rooms: list[list[int]] = Field(default_factory=list, description="[x1, y1, x2, y2] per room")
    revealed: list[int] = Field(default_factory=list, description="Tile indices ever seen")
    visible: list[int] = Field(default_factory=list, description="Tile indices seen this turn")


class ActorSchema(BaseModel):
    id: int
    name: str
    x: int
    y: int
    glyph: str
    fg: str
    bg: str
    is_player: bool = False
    is_monster: bool = False
    blocks_tile: bool = False
    vision_range: int = 0


class EventSchema(BaseModel):
    turn: int
    category: str
    message: str
    actor_ids: list[int] = Field(default_factory=list)


class StateResponse(BaseModel):
    turn: int
    runstate: str
    player: ActorSchema | None = None
    actors: list[ActorSchema] = Field(default_factory=list, description="Actors on tiles the player sees")
    events: list[EventSchema] = Field(default_factory=list)


class ActionResponse(BaseModel):
    status: str
    message: str
    turn: int
    events: list[EventSchema] = Field(default_factory=list)


class DungeonConfigResponse(BaseModel):
    world_seed: int
    map_width: int
    map_height: int
    max_rooms: int
    min_room_size: int
    max_room_size: int
    room_margin: int
    vision_range: int
