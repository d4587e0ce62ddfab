"""SessionManager — owns the live game and serialises access to it.

Turns are driven by requests rather than a background thread: each action
request holds the lock for one player action plus one pipeline run, so
exactly one turn executes at a time and readers never see a half-built index.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from dungeon.core.enums import PlayerAction
from dungeon.engine.bootstrap import new_game
from dungeon.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from dungeon.config import DungeonConfig
    from dungeon.engine.game_loop import GameLoop

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionManager:
    """Holds one GameLoop and a lock-guarded view of it."""

    def __init__(self, config: DungeonConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._event_log = EventLog(config.event_log_size)
        self._loop: GameLoop | None = None
        self._build()

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    def _build(self) -> None:
        self._event_log.clear()
        self._loop = new_game(self.config, self._event_log)
        # First tick computes the initial fields of view
        self._loop.tick()

    def read(self, fn: Callable[[GameLoop], T]) -> T:
        """Run *fn* against the game while holding the lock."""
        with self._lock:
            return fn(self._loop)

    def play(self, action: PlayerAction) -> tuple[int, list[GameEvent]]:
        """Apply one player action and run the resulting turn."""
        with self._lock:
            events = self._loop.play(action)
            turn = self._loop.world.turn
        logger.info("Action %s -> turn %d (%d events)", action.name, turn, len(events))
        return turn, events

    def reset(self) -> int:
        with self._lock:
            self._build()
            turn = self._loop.world.turn
        logger.info("Session reset (seed=%d)", self.config.world_seed)
        return turn

