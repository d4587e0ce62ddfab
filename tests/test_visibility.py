"""Tests for field of view and the visibility system."""

import pytest

from dungeon.config import DungeonConfig
from dungeon.core.enums import TileType
from dungeon.core.game_map import GameMap, MapBoundsError
from dungeon.core.models import Vector2
from dungeon.core.rect import Rect
from dungeon.systems.fov import compute_fov
from dungeon.systems.map_generator import MapGenerator
from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.visibility import VisibilitySystem
from tests.helpers.dungeon_arena import DungeonArena


def _generated_map(seed: int = 3) -> GameMap:
    cfg = DungeonConfig(world_seed=seed)
    return MapGenerator(cfg, DeterministicRNG(seed)).generate()


# ---------------------------------------------------------------------------
# compute_fov
# ---------------------------------------------------------------------------

class TestComputeFov:
    @pytest.mark.parametrize("pos", [(1, 1), (5, 5), (10, 3)])
    def test_range_zero_is_empty(self, pos):
        arena = DungeonArena(12, 12)
        assert compute_fov(arena.game_map, Vector2(*pos), 0) == set()

    def test_negative_range_is_empty(self):
        arena = DungeonArena(12, 12)
        assert compute_fov(arena.game_map, Vector2(5, 5), -3) == set()

    def test_range_one_sees_origin_and_neighbours(self):
        arena = DungeonArena(12, 12)
        gm = arena.game_map
        seen = compute_fov(gm, Vector2(5, 5), 1)
        expected = {gm.idx(5, 5), gm.idx(4, 5), gm.idx(6, 5), gm.idx(5, 4), gm.idx(5, 6)}
        assert seen == expected

    def test_respects_euclidean_radius(self):
        arena = DungeonArena(30, 30)
        gm = arena.game_map
        origin = Vector2(15, 15)
        seen = compute_fov(gm, origin, 5)
        for i in seen:
            p = gm.xy(i)
            assert (p.x - origin.x) ** 2 + (p.y - origin.y) ** 2 <= 25
        assert gm.idx(20, 15) in seen
        assert gm.idx(19, 19) not in seen

    def test_open_room_fully_visible(self):
        arena = DungeonArena(12, 12)
        gm = arena.game_map
        seen = compute_fov(gm, Vector2(5, 5), 20)
        assert seen == set(range(gm.width * gm.height))

    def test_wall_blocks_sight_but_is_visible(self):
        arena = DungeonArena(16, 12)
        for y in range(1, 11):
            arena.set_wall(7, y)
        gm = arena.game_map
        seen = compute_fov(gm, Vector2(3, 5), 10)
        assert gm.idx(7, 5) in seen
        assert gm.idx(10, 5) not in seen
        assert gm.idx(8, 5) not in seen

    def test_edge_of_floor_map_stays_in_bounds(self):
        gm = GameMap(5, 5, fill=TileType.FLOOR)
        seen = compute_fov(gm, Vector2(0, 0), 10)
        assert seen == set(range(25))

    def test_origin_out_of_bounds_fails_fast(self):
        gm = GameMap(5, 5)
        with pytest.raises(MapBoundsError):
            compute_fov(gm, Vector2(9, 9), 3)

    @pytest.mark.parametrize("seed", [3, 11, 42])
    def test_symmetry_between_floor_tiles(self, seed):
        gm = _generated_map(seed)
        radius = 8
        for room in gm.rooms[:4]:
            a = room.center()
            a_idx = gm.pos_idx(a)
            for b_idx in compute_fov(gm, a, radius):
                if gm.tiles[b_idx] != TileType.FLOOR:
                    continue
                back = compute_fov(gm, gm.xy(b_idx), radius)
                assert a_idx in back, f"{gm.xy(b_idx)} seen from {a} but not vice versa"

    def test_symmetry_around_pillars(self):
        arena = DungeonArena(20, 20)
        for x, y in ((6, 6), (9, 4), (11, 11), (5, 12), (14, 8)):
            arena.set_wall(x, y)
        gm = arena.game_map
        floors = [i for i, t in enumerate(gm.tiles) if t == TileType.FLOOR]
        views = {i: compute_fov(gm, gm.xy(i), 10) for i in floors}
        for a in floors:
            for b in views[a]:
                if gm.tiles[b] == TileType.FLOOR:
                    assert a in views[b]


# ---------------------------------------------------------------------------
# VisibilitySystem
# ---------------------------------------------------------------------------

class TestVisibilitySystem:
    def test_clears_dirty_flag(self):
        arena = DungeonArena()
        player = arena.add_player((5, 5))
        assert player.viewshed.dirty
        VisibilitySystem().run(arena.world)
        assert not player.viewshed.dirty
        assert arena.game_map.pos_idx(player.pos) in player.viewshed.visible_tiles

    def test_clean_viewshed_not_recomputed(self):
        arena = DungeonArena()
        player = arena.add_player((5, 5))
        system = VisibilitySystem()
        system.run(arena.world)
        before = set(player.viewshed.visible_tiles)
        # Changing the map must not matter while the viewshed is clean
        arena.set_wall(6, 5)
        assert system.run(arena.world) == 0
        assert player.viewshed.visible_tiles == before

    def test_move_marks_dirty_and_recomputes(self):
        arena = DungeonArena()
        player = arena.add_player((5, 5))
        system = VisibilitySystem()
        system.run(arena.world)
        arena.world.move_actor(player.id, Vector2(6, 5))
        assert player.viewshed.dirty
        assert system.run(arena.world) == 1
        assert arena.game_map.idx(6, 5) in player.viewshed.visible_tiles

    def test_range_zero_actor_sees_nothing(self):
        arena = DungeonArena()
        player = arena.add_player((5, 5), vision=0)
        VisibilitySystem().run(arena.world)
        assert player.viewshed.visible_tiles == set()
        assert arena.game_map.visible_tiles == set()

    def test_map_visible_tiles_follow_player(self):
        arena = DungeonArena()
        player = arena.add_player((5, 5))
        VisibilitySystem().run(arena.world)
        assert arena.game_map.visible_tiles == player.viewshed.visible_tiles
        assert arena.game_map.visible_tiles is not player.viewshed.visible_tiles

    def test_only_player_reveals(self):
        arena = DungeonArena(20, 20, rooms=[Rect(2, 2, 6, 6), Rect(12, 12, 16, 16)])
        player = arena.add_player((4, 4), vision=3)
        monster = arena.add_monster((14, 14), vision=3)
        VisibilitySystem().run(arena.world)
        gm = arena.game_map
        assert monster.viewshed.visible_tiles
        assert gm.revealed_tiles == player.viewshed.visible_tiles
        assert not (gm.revealed_tiles & monster.viewshed.visible_tiles)

    def test_revealed_tiles_only_grow(self):
        arena = DungeonArena(30, 12)
        player = arena.add_player((2, 5), vision=4)
        system = VisibilitySystem()
        previous: set[int] = set()
        for x in range(2, 20):
            arena.world.move_actor(player.id, Vector2(x, 5))
            system.run(arena.world)
            revealed = arena.game_map.revealed_tiles
            assert previous <= revealed
            assert player.viewshed.visible_tiles <= revealed
            previous = set(revealed)
        # The starting area stays revealed after walking away from it
        assert arena.game_map.idx(1, 5) in arena.game_map.revealed_tiles
        assert arena.game_map.idx(1, 5) not in arena.game_map.visible_tiles
