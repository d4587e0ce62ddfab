"""Core data models: Vector2, Viewshed, Actor."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeon.core.enums import Capability, Direction


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev(self, other: Vector2) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


DIRECTION_OFFSETS: dict[int, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.EAST: Vector2(1, 0),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
}

# Cardinal offsets followed by the four diagonals
NEIGHBOUR_OFFSETS: tuple[Vector2, ...] = (
    *DIRECTION_OFFSETS.values(),
    Vector2(1, -1),
    Vector2(1, 1),
    Vector2(-1, 1),
    Vector2(-1, -1),
)


@dataclass(slots=True)
class Viewshed:
    """Tiles an actor can currently see, plus its sight range.

    ``dirty`` forces a recompute on the next visibility pass.
    """

    range: int = 8
    visible_tiles: set[int] = field(default_factory=set)
    dirty: bool = True


@dataclass(slots=True)
class Actor:
    """A creature on the map: the player or a monster."""

    id: int
    name: str
    pos: Vector2
    capabilities: Capability = Capability.NONE
    viewshed: Viewshed | None = None

    # Renderer data only
    glyph: str = "?"
    fg: str = "white"
    bg: str = "black"

    def __post_init__(self) -> None:
        both = Capability.PLAYER | Capability.MONSTER
        if self.capabilities & both == both:
            raise ValueError(f"Actor {self.id} cannot be both player and monster")

    @property
    def is_player(self) -> bool:
        return bool(self.capabilities & Capability.PLAYER)

    @property
    def is_monster(self) -> bool:
        return bool(self.capabilities & Capability.MONSTER)

    @property
    def blocks_tile(self) -> bool:
        return bool(self.capabilities & Capability.BLOCKS_TILE)

    def move_to(self, pos: Vector2) -> None:
        """Change position and invalidate the cached field of view."""
        if pos == self.pos:
            return
        self.pos = pos
        if self.viewshed is not None:
            self.viewshed.dirty = True
