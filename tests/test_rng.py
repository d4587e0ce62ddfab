"""Tests for the stateless domain-separated RNG."""

import pytest

from dungeon.core.enums import Domain
from dungeon.systems.rng import DeterministicRNG


class TestDeterministicRNG:
    def test_same_inputs_same_output(self):
        a = DeterministicRNG(42)
        b = DeterministicRNG(42)
        for key in range(20):
            assert a.next_int(Domain.MAP_GEN, key, 0, 0, 1000) == b.next_int(Domain.MAP_GEN, key, 0, 0, 1000)

    def test_float_range(self):
        rng = DeterministicRNG(1)
        for key in range(200):
            f = rng.next_float(Domain.SPAWN, key, 3)
            assert 0.0 <= f < 1.0

    def test_int_inclusive_bounds(self):
        rng = DeterministicRNG(5)
        values = {rng.next_int(Domain.MAP_GEN, key, 0, 3, 6) for key in range(300)}
        assert values == {3, 4, 5, 6}

    def test_empty_range_rejected(self):
        with pytest.raises(ValueError):
            DeterministicRNG(5).next_int(Domain.MAP_GEN, 0, 0, 6, 3)

    def test_domains_are_independent(self):
        rng = DeterministicRNG(9)
        gen = [rng.next_int(Domain.MAP_GEN, k, 0, 0, 10**9) for k in range(10)]
        spawn = [rng.next_int(Domain.SPAWN, k, 0, 0, 10**9) for k in range(10)]
        assert gen != spawn

    def test_seed_changes_stream(self):
        a = [DeterministicRNG(1).next_float(Domain.MAP_GEN, k, 0) for k in range(10)]
        b = [DeterministicRNG(2).next_float(Domain.MAP_GEN, k, 0) for k in range(10)]
        assert a != b


class TestRollDice:
    def test_single_die_range(self):
        rng = DeterministicRNG(3)
        values = {rng.roll_dice(Domain.SPAWN, key, 0, 1, 2) for key in range(100)}
        assert values == {1, 2}

    def test_multiple_dice_range(self):
        rng = DeterministicRNG(3)
        for key in range(100):
            assert 3 <= rng.roll_dice(Domain.SPAWN, key, 1, 3, 6) <= 18

    def test_deterministic(self):
        assert (
            DeterministicRNG(8).roll_dice(Domain.MAP_GEN, 4, 2, 2, 20)
            == DeterministicRNG(8).roll_dice(Domain.MAP_GEN, 4, 2, 2, 20)
        )

    def test_dice_do_not_reuse_plain_draws(self):
        rng = DeterministicRNG(11)
        sides = 10**9
        for slot in (0, 2, 3):
            dice = [rng.roll_dice(Domain.MAP_GEN, k, slot, 1, sides) for k in range(20)]
            same_slot = [rng.next_int(Domain.MAP_GEN, k, slot, 1, sides) for k in range(20)]
            wide_slot = [rng.next_int(Domain.MAP_GEN, k, slot * 64, 1, sides) for k in range(20)]
            assert dice != same_slot
            assert dice != wide_slot

    def test_each_die_reads_its_own_stream(self):
        rng = DeterministicRNG(11)
        sides = 10**6
        for key in range(10):
            total = rng.roll_dice(Domain.SPAWN, key, 1, 2, sides)
            parts = [rng.next_int(Domain.SPAWN, key, 1, 1, sides, stream=s) for s in (1, 2)]
            assert total == sum(parts)

    @pytest.mark.parametrize("n,sides", [(0, 6), (1, 0), (-1, 4)])
    def test_invalid_dice(self, n, sides):
        with pytest.raises(ValueError):
            DeterministicRNG(1).roll_dice(Domain.SPAWN, 0, 0, n, sides)
