"""Actor spawner — places the player and one monster per extra room."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.enums import Capability, Domain
from dungeon.core.models import Actor, Viewshed

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.core.world_state import WorldState
    from dungeon.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# roll_dice(1, N) result -> (kind, glyph)
MONSTER_KINDS: dict[int, tuple[str, str]] = {
    1: ("Goblin", "g"),
    2: ("Orc", "o"),
}


class ActorSpawner:
    """Creates actors with deterministic rolls from the SPAWN domain."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: DungeonConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def spawn_player(self, world: WorldState) -> Actor:
        """Place the player at the center of the first room."""
        start = world.game_map.rooms[0].center()
        player = Actor(
            id=world.allocate_actor_id(),
            name="Player",
            pos=start,
            capabilities=Capability.PLAYER,
            viewshed=Viewshed(range=self._config.vision_range),
            glyph="@",
            fg="yellow",
        )
        world.add_actor(player)
        logger.info("Player spawned at %s", start)
        return player

    def spawn_monsters(self, world: WorldState) -> list[Actor]:
        """Place one monster at the center of every room after the first."""
        spawned: list[Actor] = []
        for i, room in enumerate(world.game_map.rooms[1:]):
            kind, glyph = self.roll_kind(i)
            monster = Actor(
                id=world.allocate_actor_id(),
                name=f"{kind} #{i}",
                pos=room.center(),
                capabilities=Capability.MONSTER | Capability.BLOCKS_TILE,
                viewshed=Viewshed(range=self._config.vision_range),
                glyph=glyph,
                fg="red",
            )
            world.add_actor(monster)
            spawned.append(monster)
        logger.info("Spawned %d monsters", len(spawned))
        return spawned

    def roll_kind(self, index: int) -> tuple[str, str]:
        roll = self._rng.roll_dice(Domain.SPAWN, index, 0, 1, len(MONSTER_KINDS))
        return MONSTER_KINDS[roll]
