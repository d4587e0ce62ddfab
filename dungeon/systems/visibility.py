"""Visibility system — recomputes dirty viewsheds once per turn."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.systems.fov import compute_fov

if TYPE_CHECKING:
    from dungeon.core.world_state import WorldState

logger = logging.getLogger(__name__)


class VisibilitySystem:
    """Refreshes every dirty viewshed and the map's player-facing flags."""

    __slots__ = ()

    def run(self, world: WorldState) -> int:
        """Recompute dirty viewsheds. Returns how many were recomputed."""
        game_map = world.game_map
        recomputed = 0
        for actor in world.actors.values():
            viewshed = actor.viewshed
            if viewshed is None or not viewshed.dirty:
                continue
            viewshed.visible_tiles = compute_fov(game_map, actor.pos, viewshed.range)
            viewshed.dirty = False
            recomputed += 1
            if actor.is_player:
                game_map.revealed_tiles |= viewshed.visible_tiles

        player = world.player
        if player is not None and player.viewshed is not None:
            game_map.visible_tiles = set(player.viewshed.visible_tiles)
        else:
            game_map.visible_tiles = set()

        if recomputed:
            logger.debug("Turn %d: recomputed %d viewsheds", world.turn, recomputed)
        return recomputed
