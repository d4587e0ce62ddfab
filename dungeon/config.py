"""Dungeon configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DungeonConfig:
    """Immutable configuration for one game session."""

    # World
    world_seed: int = 42
    map_width: int = 80
    map_height: int = 50

    # Map generation
    max_rooms: int = 30
    min_room_size: int = 6
    max_room_size: int = 10
    room_margin: int = 1            # Extra wall tiles kept between rooms
    placement_retries: int = 3      # Re-samples per placement attempt before giving up

    # Actors
    vision_range: int = 8

    # AI
    max_path_nodes: int = 200       # A* node budget for routing around obstacles

    # Session
    max_turns: int = 200
    event_log_size: int = 500

    # Logging
    log_level: str = "INFO"
