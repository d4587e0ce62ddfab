"""AI layer: monster chase behaviour and pathfinding."""

from dungeon.ai.monster_ai import MonsterAI
from dungeon.ai.pathfinding import Pathfinder

__all__ = ["MonsterAI", "Pathfinder"]
