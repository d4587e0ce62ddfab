"""A* routing on the tile index space of a GameMap.

Monsters fall back to this when every direct step toward the player is
blocked. Nodes are flat tile indices, so ``GameMap.blocked`` is read directly.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from dungeon.core.models import NEIGHBOUR_OFFSETS, Vector2

if TYPE_CHECKING:
    from dungeon.core.game_map import GameMap


class Pathfinder:
    """Uniform-cost A* over all eight neighbours, diagonals included.

    Walls and blocking actors are both avoided through ``blocked``. At most
    ``max_nodes`` tiles are expanded per search.
    """

    __slots__ = ("_map", "_max_nodes")

    def __init__(self, game_map: GameMap, max_nodes: int = 200) -> None:
        self._map = game_map
        self._max_nodes = max_nodes

    def find_path(self, start: Vector2, goal: Vector2) -> list[Vector2] | None:
        """Steps from *start* to *goal*, excluding *start* and including *goal*.

        The goal tile may itself be blocked (it is usually the player or a
        monster). Returns None when the goal is off the map, unreachable, or
        not found after ``max_nodes`` expansions.
        """
        if start == goal:
            return []
        gm = self._map
        if not gm.in_bounds(goal):
            return None

        src = gm.pos_idx(start)
        dst = gm.pos_idx(goal)
        parents: dict[int, int] = {}
        cost: dict[int, int] = {src: 0}
        frontier: list[tuple[int, int, int]] = [(start.chebyshev(goal), 0, src)]
        expanded: set[int] = set()
        seq = 0

        while frontier and len(expanded) < self._max_nodes:
            _, _, node = heapq.heappop(frontier)
            if node == dst:
                return [gm.xy(i) for i in self._trace(parents, node)]
            if node in expanded:
                continue
            expanded.add(node)

            here = gm.xy(node)
            step_cost = cost[node] + 1
            for offset in NEIGHBOUR_OFFSETS:
                nxt = here + offset
                if not gm.in_bounds(nxt):
                    continue
                n = gm.pos_idx(nxt)
                if n in expanded or (gm.blocked[n] and n != dst):
                    continue
                if step_cost >= cost.get(n, step_cost + 1):
                    continue
                cost[n] = step_cost
                parents[n] = node
                seq += 1
                heapq.heappush(frontier, (step_cost + nxt.chebyshev(goal), seq, n))

        return None

    @staticmethod
    def _trace(parents: dict[int, int], node: int) -> list[int]:
        chain: list[int] = []
        while node in parents:
            chain.append(node)
            node = parents[node]
        chain.reverse()
        return chain
