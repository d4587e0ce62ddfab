"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, unique


@unique
class TileType(IntEnum):
    """Tile kinds on the map."""

    WALL = 0
    FLOOR = 1


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_GEN = 0
    SPAWN = 1


@unique
class RunState(IntEnum):
    """Outer driver state: waiting for input, or executing one turn."""

    PAUSED = 0
    RUNNING = 1


@unique
class AIState(IntEnum):
    """Per-turn monster disposition, derived from visibility only."""

    IDLE = 0
    AWARE = 1


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class PlayerAction(IntEnum):
    """Discrete actions the input handler may hand to the game loop."""

    WAIT = 0
    MOVE_NORTH = 1
    MOVE_EAST = 2
    MOVE_SOUTH = 3
    MOVE_WEST = 4


class Capability(IntFlag):
    """Capability tags carried by an actor."""

    NONE = 0
    PLAYER = 1
    MONSTER = 2
    BLOCKS_TILE = 4
