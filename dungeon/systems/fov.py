"""Symmetric shadow-casting field of view.

The map is scanned in four quadrants, row by row outward from the origin.
Each row carries the slope interval still lit; walls narrow the interval for
the rows behind them. Slopes are exact fractions, and a floor tile counts as
visible only when its center lies inside the lit interval, which makes
visibility between floor tiles symmetric.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING

from dungeon.core.models import Vector2

if TYPE_CHECKING:
    from dungeon.core.game_map import GameMap

# (dx, dy) per unit of depth, then (dx, dy) per column: north, east, south, west
_QUADRANTS: tuple[tuple[int, int, int, int], ...] = (
    (0, -1, 1, 0),
    (1, 0, 0, 1),
    (0, 1, 1, 0),
    (-1, 0, 0, 1),
)


class _Row:
    __slots__ = ("depth", "start_slope", "end_slope")

    def __init__(self, depth: int, start_slope: Fraction, end_slope: Fraction) -> None:
        self.depth = depth
        self.start_slope = start_slope
        self.end_slope = end_slope

    def columns(self) -> range:
        min_col = _round_ties_up(self.depth * self.start_slope)
        max_col = _round_ties_down(self.depth * self.end_slope)
        return range(min_col, max_col + 1)

    def is_symmetric(self, col: int) -> bool:
        return self.depth * self.start_slope <= col <= self.depth * self.end_slope

    def next(self) -> _Row:
        return _Row(self.depth + 1, self.start_slope, self.end_slope)


def _slope(depth: int, col: int) -> Fraction:
    return Fraction(2 * col - 1, 2 * depth)


def _round_ties_up(n: Fraction) -> int:
    return math.floor(n + Fraction(1, 2))


def _round_ties_down(n: Fraction) -> int:
    return math.ceil(n - Fraction(1, 2))


def compute_fov(game_map: GameMap, origin: Vector2, radius: int) -> set[int]:
    """Return the tile indices visible from *origin* within Euclidean *radius*.

    Walls are visible but opaque. Tiles beyond the map edge are treated as
    opaque and never returned. A non-positive radius sees nothing.
    """
    if radius <= 0:
        return set()
    ox, oy = origin.x, origin.y
    visible: set[int] = {game_map.idx(ox, oy)}
    r2 = radius * radius

    for dx_depth, dy_depth, dx_col, dy_col in _QUADRANTS:
        rows = [_Row(1, Fraction(-1), Fraction(1))]
        while rows:
            row = rows.pop()
            depth = row.depth
            if depth > radius:
                continue
            prev_wall: bool | None = None
            for col in row.columns():
                x = ox + dx_depth * depth + dx_col * col
                y = oy + dy_depth * depth + dy_col * col
                wall = game_map.is_opaque_xy(x, y)
                if (
                    (wall or row.is_symmetric(col))
                    and depth * depth + col * col <= r2
                    and game_map.in_bounds_xy(x, y)
                ):
                    visible.add(y * game_map.width + x)
                if prev_wall is True and not wall:
                    row.start_slope = _slope(depth, col)
                if prev_wall is False and wall:
                    next_row = row.next()
                    next_row.end_slope = _slope(depth, col)
                    rows.append(next_row)
                prev_wall = wall
            if prev_wall is False:
                rows.append(row.next())

    return visible
