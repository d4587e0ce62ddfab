"""Game message log: what monsters and the player did, turn by turn."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One line of the message log."""

    turn: int
    category: str
    message: str
    actor_ids: tuple[int, ...] = ()  # first id is the actor that caused it

    def involves(self, actor_id: int) -> bool:
        return actor_id in self.actor_ids

    def __str__(self) -> str:
        return f"[T{self.turn}] {self.message}"


class EventLog:
    """Bounded message log; the oldest lines fall off once full.

    The pipeline writes one batch per turn while API readers copy slices,
    so every access takes the lock.
    """

    __slots__ = ("_lines", "_lock")

    def __init__(self, maxlen: int = 500) -> None:
        self._lines: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def extend(self, events: Iterable[GameEvent]) -> None:
        with self._lock:
            self._lines.extend(events)

    def query(
        self,
        since_turn: int | None = None,
        actor_id: int | None = None,
        limit: int | None = None,
    ) -> list[GameEvent]:
        """Oldest-first lines matching every given filter, capped to the newest *limit*."""
        with self._lock:
            lines = list(self._lines)
        if since_turn is not None:
            lines = [e for e in lines if e.turn >= since_turn]
        if actor_id is not None:
            lines = [e for e in lines if e.involves(actor_id)]
        if limit is not None:
            lines = lines[-limit:] if limit > 0 else []
        return lines

    def latest(self, count: int = 50) -> list[GameEvent]:
        return self.query(limit=count)

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)
