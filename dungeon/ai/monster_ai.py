"""Chase AI for monsters.

A monster is AWARE on a turn when the player's tile is in its viewshed and
IDLE otherwise; nothing is remembered between turns. Aware monsters take one
step (any of the eight neighbours) toward the player, preferring the step that
shortens the Chebyshev distance and falling back to A* when every direct step
is blocked. The player's own tile is never entered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.ai.pathfinding import Pathfinder
from dungeon.core.enums import AIState
from dungeon.core.models import Vector2
from dungeon.utils.event_log import GameEvent

if TYPE_CHECKING:
    from dungeon.core.game_map import GameMap
    from dungeon.core.models import Actor
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


def ai_state(actor: Actor, player_idx: int) -> AIState:
    """Derive this turn's disposition from the actor's current viewshed."""
    viewshed = actor.viewshed
    if viewshed is not None and player_idx in viewshed.visible_tiles:
        return AIState.AWARE
    return AIState.IDLE


def greedy_steps(origin: Vector2, target: Vector2) -> list[Vector2]:
    """Unit steps that close in on *target*, best first.

    When both axes differ the diagonal comes first; it always shortens the
    Chebyshev distance. The single-axis steps follow, larger gap
    first with ties going to the x axis.
    """
    delta = target - origin
    sx = (delta.x > 0) - (delta.x < 0)
    sy = (delta.y > 0) - (delta.y < 0)
    steps: list[Vector2] = []
    if sx and sy:
        steps.append(Vector2(origin.x + sx, origin.y + sy))
    x_step = Vector2(origin.x + sx, origin.y) if sx else None
    y_step = Vector2(origin.x, origin.y + sy) if sy else None
    ordered = (x_step, y_step) if abs(delta.x) >= abs(delta.y) else (y_step, x_step)
    steps.extend(s for s in ordered if s is not None)
    return steps


class MonsterAI:
    """Moves every aware monster one step toward the player."""

    __slots__ = ("_max_path_nodes",)

    def __init__(self, max_path_nodes: int = 200) -> None:
        self._max_path_nodes = max_path_nodes

    def run(self, world: WorldState) -> list[GameEvent]:
        player = world.player
        if player is None:
            return []
        game_map = world.game_map
        player_idx = game_map.pos_idx(player.pos)
        events: list[GameEvent] = []

        for monster in world.monsters():
            if ai_state(monster, player_idx) is AIState.IDLE:
                continue
            events.append(GameEvent(
                turn=world.turn,
                category="ai",
                message=f"{monster.name} shouts insults",
                actor_ids=(monster.id, player.id),
            ))
            step = self.next_step(game_map, monster.pos, player.pos)
            if step is None:
                continue
            self._commit_move(game_map, monster, step)

        return events

    def next_step(self, game_map: GameMap, origin: Vector2, target: Vector2) -> Vector2 | None:
        """Choose the tile to step onto, or None to stay put."""
        if origin.manhattan(target) <= 1:
            return None

        for step in greedy_steps(origin, target):
            if step == target:
                continue
            if game_map.in_bounds(step) and not game_map.is_blocked(step):
                return step

        path = Pathfinder(game_map, self._max_path_nodes).find_path(origin, target)
        if path is not None and len(path) > 1:
            return path[0]
        return None

    @staticmethod
    def _commit_move(game_map: GameMap, monster: Actor, dest: Vector2) -> None:
        # Keep blocking current within the turn so later monsters see this move
        if monster.blocks_tile:
            game_map.blocked[game_map.pos_idx(monster.pos)] = False
            game_map.blocked[game_map.pos_idx(dest)] = True
        logger.debug("%s moves %s -> %s", monster.name, monster.pos, dest)
        monster.move_to(dest)
