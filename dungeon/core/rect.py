"""Axis-aligned room rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from dungeon.core.models import Vector2


@dataclass(frozen=True, slots=True)
class Rect:
    """Room bounds. The carved interior is ``x1+1..x2`` by ``y1+1..y2``."""

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x2 <= self.x1 or self.y2 <= self.y1:
            raise ValueError(f"Degenerate rectangle {self}")

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> Vector2:
        return Vector2((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect, margin: int = 0) -> bool:
        """Inclusive-bounds overlap test, with this rectangle grown by *margin*."""
        return (
            self.x1 - margin <= other.x2
            and self.x2 + margin >= other.x1
            and self.y1 - margin <= other.y2
            and self.y2 + margin >= other.y1
        )

    def inner_tiles(self) -> Iterator[tuple[int, int]]:
        for y in range(self.y1 + 1, self.y2 + 1):
            for x in range(self.x1 + 1, self.x2 + 1):
                yield x, y
