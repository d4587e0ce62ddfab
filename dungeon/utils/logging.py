"""Logging configuration with the current game turn stamped on each record."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TextIO

_current_turn: ContextVar[int | None] = ContextVar("current_turn", default=None)


def set_log_turn(turn: int | None) -> None:
    """Tag subsequent log records from this context with *turn*."""
    _current_turn.set(turn)


class TurnFilter(logging.Filter):
    """Adds a ``turn`` attribute ("-" outside the turn pipeline)."""

    def filter(self, record: logging.LogRecord) -> bool:
        turn = _current_turn.get()
        record.turn = "-" if turn is None else str(turn)
        return True


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure root logger with a compact turn-aware format."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.addFilter(TurnFilter())
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] T%(turn)-4s %(name)-28s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
