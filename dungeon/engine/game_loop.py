"""GameLoop — alternates between awaiting a player action and running a turn."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon.core.enums import PlayerAction, RunState
from dungeon.engine.player import apply_player_action

if TYPE_CHECKING:
    from dungeon.core.world_state import WorldState
    from dungeon.engine.turn_pipeline import TurnPipeline
    from dungeon.utils.event_log import GameEvent


class GameLoop:
    """Two-state driver.

    RUNNING runs the pipeline exactly once and drops to PAUSED; PAUSED waits
    for one recognised action and switches to RUNNING. The loop starts
    RUNNING so the first tick computes the initial fields of view.
    """

    __slots__ = ("_pipeline", "_runstate", "_last_events")

    def __init__(self, pipeline: TurnPipeline, runstate: RunState = RunState.RUNNING) -> None:
        self._pipeline = pipeline
        self._runstate = runstate
        self._last_events: list[GameEvent] = []

    @property
    def world(self) -> WorldState:
        return self._pipeline.world

    @property
    def runstate(self) -> RunState:
        return self._runstate

    @property
    def last_events(self) -> list[GameEvent]:
        """Events produced by the most recent turn."""
        return self._last_events

    def tick(self, action: PlayerAction | None = None) -> RunState:
        """Advance the state machine by one frame."""
        if self._runstate == RunState.RUNNING:
            self._last_events = self._pipeline.run_once()
            self._runstate = RunState.PAUSED
        else:
            self._runstate = apply_player_action(self.world, action)
        return self._runstate

    def play(self, action: PlayerAction) -> list[GameEvent]:
        """Accept one player action and run the turn it triggers."""
        if self._runstate == RunState.RUNNING:
            self.tick()
        if self.tick(action) == RunState.RUNNING:
            self.tick()
            return self._last_events
        return []
