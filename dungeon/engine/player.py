"""Applying one player action to the world."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.core.enums import Direction, PlayerAction, RunState
from dungeon.core.models import DIRECTION_OFFSETS, Vector2

if TYPE_CHECKING:
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)

ACTION_DIRECTIONS: dict[PlayerAction, Direction] = {
    PlayerAction.MOVE_NORTH: Direction.NORTH,
    PlayerAction.MOVE_EAST: Direction.EAST,
    PlayerAction.MOVE_SOUTH: Direction.SOUTH,
    PlayerAction.MOVE_WEST: Direction.WEST,
}


def try_move_player(world: WorldState, dx: int, dy: int) -> bool:
    """Step the player by (dx, dy) if the clamped destination is not blocked."""
    player = world.player
    if player is None:
        return False
    game_map = world.game_map
    dest = Vector2(
        min(game_map.width - 1, max(0, player.pos.x + dx)),
        min(game_map.height - 1, max(0, player.pos.y + dy)),
    )
    if dest == player.pos or game_map.is_blocked(dest):
        logger.debug("Player move to %s refused", dest)
        return False
    world.move_actor(player.id, dest)
    return True


def apply_player_action(world: WorldState, action: PlayerAction | None) -> RunState:
    """Consume one action. No action keeps the loop paused."""
    if action is None:
        return RunState.PAUSED
    direction = ACTION_DIRECTIONS.get(action)
    if direction is not None:
        offset = DIRECTION_OFFSETS[direction]
        try_move_player(world, offset.x, offset.y)
    return RunState.RUNNING
