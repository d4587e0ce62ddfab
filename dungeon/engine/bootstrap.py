"""World construction: map, actors, initial index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.ai.monster_ai import MonsterAI
from dungeon.core.world_state import WorldState
from dungeon.engine.game_loop import GameLoop
from dungeon.engine.turn_pipeline import TurnPipeline
from dungeon.systems.map_generator import MapGenerator
from dungeon.systems.map_indexing import SpatialIndex
from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.spawner import ActorSpawner

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.utils.event_log import EventLog

logger = logging.getLogger(__name__)


def build_world(config: DungeonConfig) -> WorldState:
    """Generate the map, spawn the player and monsters, index the result."""
    rng = DeterministicRNG(config.world_seed)
    game_map = MapGenerator(config, rng).generate()
    world = WorldState(seed=config.world_seed, game_map=game_map)

    spawner = ActorSpawner(config, rng)
    spawner.spawn_player(world)
    spawner.spawn_monsters(world)

    SpatialIndex().run(world)
    return world


def new_game(config: DungeonConfig, event_log: EventLog | None = None) -> GameLoop:
    """Build a world and wrap it in a GameLoop ready for its first tick."""
    world = build_world(config)
    pipeline = TurnPipeline(
        world,
        monster_ai=MonsterAI(config.max_path_nodes),
        event_log=event_log,
    )
    logger.info("New game (seed=%d, %d actors)", config.world_seed, len(world.actors))
    return GameLoop(pipeline)
