"""Core data models and world representation."""

from dungeon.core.enums import AIState, Capability, Direction, Domain, PlayerAction, RunState, TileType
from dungeon.core.models import Actor, Vector2, Viewshed
from dungeon.core.rect import Rect
from dungeon.core.game_map import GameMap, MapBoundsError
from dungeon.core.world_state import WorldState

__all__ = [
    "AIState",
    "Actor",
    "Capability",
    "Direction",
    "Domain",
    "GameMap",
    "MapBoundsError",
    "PlayerAction",
    "Rect",
    "RunState",
    "TileType",
    "Vector2",
    "Viewshed",
    "WorldState",
]
