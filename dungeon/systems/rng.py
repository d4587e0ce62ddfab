"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of (WorldSeed, Domain, key, slot, stream), so
map layout and actor rolls do not depend on how many other draws happened
before them. Plain draws use stream 0; die ``i`` of a dice roll uses stream
``i + 1``, so dice never share a hash input with ``next_int``/``next_float``.

Formula: RNG_Value = Hash(WorldSeed, Domain, Key, Slot, Stream)
"""

from __future__ import annotations

import struct

import xxhash

from dungeon.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, slot: int, stream: int = 0) -> int:
        payload = struct.pack("<qiqii", self._seed, domain.value, key, slot, stream)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, slot: int, stream: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, slot, stream) / (self._MAX_UINT64 + 1)

    def next_int(
        self, domain: Domain, key: int, slot: int, low: int, high: int, stream: int = 0,
    ) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        f = self.next_float(domain, key, slot, stream)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, slot: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, slot) < probability

    def roll_dice(self, domain: Domain, key: int, slot: int, n: int, sides: int) -> int:
        """Sum of *n* dice with *sides* faces each (so in [n, n*sides]).

        Each die reads the same slot on its own stream.
        """
        if n < 1 or sides < 1:
            raise ValueError(f"Cannot roll {n}d{sides}")
        return sum(
            self.next_int(domain, key, slot, 1, sides, stream=i + 1)
            for i in range(n)
        )
