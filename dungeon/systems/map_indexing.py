"""Per-turn rebuild of the map's blocking and occupancy index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from dungeon.core.game_map import GameMap
    from dungeon.core.models import Actor
    from dungeon.core.world_state import WorldState


class OccupancyError(RuntimeError):
    """Two blocking actors ended a turn on the same tile."""


class SpatialIndex:
    """Rebuilds ``blocked`` and ``tile_content`` from scratch.

    Nothing is patched incrementally between turns, so a stale blocking
    flag can never outlive the turn that produced it.
    """

    __slots__ = ()

    def rebuild(self, game_map: GameMap, actors: Iterable[Actor]) -> None:
        game_map.populate_blocked()
        game_map.tile_content.clear()
        blockers: dict[int, int] = {}
        for actor in actors:
            i = game_map.pos_idx(actor.pos)
            game_map.tile_content.setdefault(i, set()).add(actor.id)
            if actor.blocks_tile:
                other = blockers.get(i)
                if other is not None:
                    raise OccupancyError(
                        f"Actors {other} and {actor.id} both block tile {actor.pos}"
                    )
                blockers[i] = actor.id
                game_map.blocked[i] = True

    def run(self, world: WorldState) -> None:
        self.rebuild(world.game_map, world.actors.values())
