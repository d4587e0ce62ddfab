"""Engine systems: RNG, map generation, visibility, spatial indexing, spawning."""

from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.map_generator import MapGenerator
from dungeon.systems.map_indexing import OccupancyError, SpatialIndex
from dungeon.systems.spawner import ActorSpawner
from dungeon.systems.visibility import VisibilitySystem

__all__ = [
    "ActorSpawner",
    "DeterministicRNG",
    "MapGenerator",
    "OccupancyError",
    "SpatialIndex",
    "VisibilitySystem",
]
