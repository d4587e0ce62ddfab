"""Mutable authoritative world state."""

from __future__ import annotations

from typing import Iterator

from dungeon.core.enums import Capability
from dungeon.core.game_map import GameMap, MapBoundsError
from dungeon.core.models import Actor, Vector2


class WorldState:
    """The single source of truth: the map plus the actor store."""

    __slots__ = ("turn", "seed", "game_map", "actors", "player_id", "_next_actor_id")

    def __init__(self, seed: int, game_map: GameMap) -> None:
        self.turn: int = 0
        self.seed: int = seed
        self.game_map: GameMap = game_map
        self.actors: dict[int, Actor] = {}
        self.player_id: int | None = None
        self._next_actor_id: int = 1

    def allocate_actor_id(self) -> int:
        aid = self._next_actor_id
        self._next_actor_id += 1
        return aid

    def add_actor(self, actor: Actor) -> None:
        if not self.game_map.in_bounds(actor.pos):
            raise MapBoundsError(actor.pos.x, actor.pos.y, self.game_map.width, self.game_map.height)
        if actor.id in self.actors:
            raise ValueError(f"Actor id {actor.id} already registered")
        if actor.is_player:
            if self.player_id is not None:
                raise ValueError("World already has a player actor")
            self.player_id = actor.id
        self.actors[actor.id] = actor

    def remove_actor(self, actor_id: int) -> Actor | None:
        actor = self.actors.pop(actor_id, None)
        if actor is not None and actor.id == self.player_id:
            self.player_id = None
        return actor

    @property
    def player(self) -> Actor | None:
        if self.player_id is None:
            return None
        return self.actors.get(self.player_id)

    def actors_with(self, capability: Capability) -> Iterator[Actor]:
        """Yield actors carrying every flag in *capability*, in id order."""
        for actor in self.actors.values():
            if actor.capabilities & capability == capability:
                yield actor

    def monsters(self) -> Iterator[Actor]:
        return self.actors_with(Capability.MONSTER)

    def move_actor(self, actor_id: int, new_pos: Vector2) -> None:
        actor = self.actors.get(actor_id)
        if actor is None:
            return
        if not self.game_map.in_bounds(new_pos):
            raise MapBoundsError(new_pos.x, new_pos.y, self.game_map.width, self.game_map.height)
        actor.move_to(new_pos)
