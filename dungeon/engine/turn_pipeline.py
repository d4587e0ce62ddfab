"""TurnPipeline — the fixed per-turn system order.

Phase cycle:
  1. Visibility — refresh dirty viewsheds, player-facing map flags
  2. Monster AI — aware monsters step toward the player
  3. Spatial index — rebuild blocking and occupancy from final positions
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from dungeon.ai.monster_ai import MonsterAI
from dungeon.systems.map_indexing import SpatialIndex
from dungeon.systems.visibility import VisibilitySystem
from dungeon.utils.logging import set_log_turn

if TYPE_CHECKING:
    from dungeon.core.world_state import WorldState
    from dungeon.utils.event_log import EventLog, GameEvent

logger = logging.getLogger(__name__)


class TurnPipeline:
    """Runs Visibility → MonsterAI → SpatialIndex to completion, once per call.

    The ordering is the only synchronisation: each system finishes before the
    next starts, and exactly one turn executes at a time.
    """

    __slots__ = ("_world", "_visibility", "_monster_ai", "_spatial_index", "_event_log")

    def __init__(
        self,
        world: WorldState,
        visibility: VisibilitySystem | None = None,
        monster_ai: MonsterAI | None = None,
        spatial_index: SpatialIndex | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self._world = world
        self._visibility = visibility or VisibilitySystem()
        self._monster_ai = monster_ai or MonsterAI()
        self._spatial_index = spatial_index or SpatialIndex()
        self._event_log = event_log

    @property
    def world(self) -> WorldState:
        return self._world

    def run_once(self) -> list[GameEvent]:
        """Execute one complete turn and return its events."""
        world = self._world
        set_log_turn(world.turn)
        t0 = time.perf_counter()
        try:
            self._visibility.run(world)
            events = self._monster_ai.run(world)
            self._spatial_index.run(world)
        finally:
            set_log_turn(None)

        if self._event_log is not None and events:
            self._event_log.extend(events)
        logger.debug(
            "Turn %d done in %.2f ms (%d events)",
            world.turn, (time.perf_counter() - t0) * 1000, len(events),
        )
        world.turn += 1
        return events
