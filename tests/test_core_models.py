"""Tests for map indexing, rectangles, actors and the world store."""

import pytest

from dungeon.core.enums import Capability, TileType
from dungeon.core.game_map import GameMap, MapBoundsError
from dungeon.core.models import Actor, Vector2, Viewshed
from dungeon.core.rect import Rect
from dungeon.core.world_state import WorldState


class TestGameMapIndexing:
    def test_row_major_index(self):
        gm = GameMap(7, 4)
        assert gm.idx(0, 0) == 0
        assert gm.idx(6, 0) == 6
        assert gm.idx(0, 1) == 7
        assert gm.idx(3, 2) == 17

    def test_xy_inverts_idx(self):
        gm = GameMap(7, 4)
        for y in range(gm.height):
            for x in range(gm.width):
                assert gm.xy(gm.idx(x, y)) == Vector2(x, y)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (7, 0), (0, 4)])
    def test_out_of_bounds_fails_fast(self, x, y):
        gm = GameMap(7, 4)
        with pytest.raises(MapBoundsError):
            gm.idx(x, y)

    def test_bad_index_rejected(self):
        with pytest.raises(IndexError):
            GameMap(3, 3).xy(9)

    def test_dimensions_must_be_positive(self):
        with pytest.raises(ValueError):
            GameMap(0, 5)

    def test_new_map_is_all_wall_and_blocked(self):
        gm = GameMap(4, 4)
        assert all(t == TileType.WALL for t in gm.tiles)
        assert all(gm.blocked)

    def test_opaque_outside_map(self):
        gm = GameMap(3, 3, fill=TileType.FLOOR)
        assert gm.is_opaque_xy(-1, 1)
        assert gm.is_opaque_xy(3, 1)
        assert not gm.is_opaque_xy(1, 1)

    def test_walkable_and_flags(self):
        gm = GameMap(3, 3)
        gm.set_xy(1, 1, TileType.FLOOR)
        assert gm.is_walkable(Vector2(1, 1))
        assert not gm.is_walkable(Vector2(0, 1))
        assert not gm.is_walkable(Vector2(5, 5))
        gm.revealed_tiles.add(gm.idx(1, 1))
        assert gm.is_revealed(Vector2(1, 1))
        assert not gm.is_visible(Vector2(1, 1))

    def test_populate_blocked_follows_tiles(self):
        gm = GameMap(3, 3)
        gm.set_xy(1, 1, TileType.FLOOR)
        gm.populate_blocked()
        assert not gm.is_blocked(Vector2(1, 1))
        assert gm.is_blocked(Vector2(0, 0))


class TestRect:
    def test_center_rounds_down(self):
        assert Rect(2, 2, 6, 6).center() == Vector2(4, 4)
        assert Rect(1, 1, 4, 6).center() == Vector2(2, 3)

    def test_from_size(self):
        r = Rect.from_size(3, 4, 5, 6)
        assert (r.x1, r.y1, r.x2, r.y2) == (3, 4, 8, 10)
        assert len(list(r.inner_tiles())) == 30

    def test_degenerate_rejected(self):
        with pytest.raises(ValueError):
            Rect(3, 3, 3, 5)
        with pytest.raises(ValueError):
            Rect(3, 5, 6, 4)

    def test_intersection_is_inclusive(self):
        a = Rect(0, 0, 5, 5)
        assert a.intersects(Rect(5, 5, 8, 8))
        assert not a.intersects(Rect(6, 0, 9, 5))

    def test_margin_pads_rooms_apart(self):
        a = Rect(0, 0, 5, 5)
        assert not a.intersects(Rect(7, 0, 10, 5), margin=1)
        assert a.intersects(Rect(6, 0, 9, 5), margin=1)

    def test_inner_tiles_skip_left_and_top_edges(self):
        tiles = set(Rect(2, 2, 6, 6).inner_tiles())
        assert (3, 3) in tiles
        assert (6, 6) in tiles
        assert (2, 4) not in tiles
        assert len(tiles) == 16


class TestActor:
    def test_player_and_monster_are_exclusive(self):
        with pytest.raises(ValueError):
            Actor(1, "x", Vector2(1, 1), Capability.PLAYER | Capability.MONSTER)

    def test_flags(self):
        orc = Actor(1, "Orc", Vector2(1, 1), Capability.MONSTER | Capability.BLOCKS_TILE)
        assert orc.is_monster and orc.blocks_tile and not orc.is_player

    def test_move_marks_viewshed_dirty(self):
        actor = Actor(1, "Orc", Vector2(1, 1), viewshed=Viewshed(range=5, dirty=False))
        actor.move_to(Vector2(1, 1))
        assert not actor.viewshed.dirty
        actor.move_to(Vector2(2, 1))
        assert actor.viewshed.dirty

    def test_distances(self):
        a, b = Vector2(1, 1), Vector2(4, 3)
        assert a.manhattan(b) == 5
        assert a.chebyshev(b) == 3


class TestWorldState:
    def _world(self) -> WorldState:
        gm = GameMap(10, 10, fill=TileType.FLOOR)
        return WorldState(seed=1, game_map=gm)

    def test_single_player(self):
        world = self._world()
        world.add_actor(Actor(world.allocate_actor_id(), "P", Vector2(1, 1), Capability.PLAYER))
        with pytest.raises(ValueError):
            world.add_actor(Actor(world.allocate_actor_id(), "Q", Vector2(2, 2), Capability.PLAYER))
        assert world.player.name == "P"

    def test_out_of_bounds_actor_rejected(self):
        world = self._world()
        with pytest.raises(MapBoundsError):
            world.add_actor(Actor(world.allocate_actor_id(), "P", Vector2(10, 1)))

    def test_move_out_of_bounds_rejected(self):
        world = self._world()
        actor = Actor(world.allocate_actor_id(), "P", Vector2(1, 1))
        world.add_actor(actor)
        with pytest.raises(MapBoundsError):
            world.move_actor(actor.id, Vector2(-1, 1))
        assert actor.pos == Vector2(1, 1)

    def test_actors_with_capability(self):
        world = self._world()
        world.add_actor(Actor(world.allocate_actor_id(), "P", Vector2(1, 1), Capability.PLAYER))
        world.add_actor(Actor(world.allocate_actor_id(), "G", Vector2(2, 2), Capability.MONSTER))
        world.add_actor(Actor(
            world.allocate_actor_id(), "O", Vector2(3, 3),
            Capability.MONSTER | Capability.BLOCKS_TILE,
        ))
        assert [a.name for a in world.monsters()] == ["G", "O"]
        assert [a.name for a in world.actors_with(Capability.BLOCKS_TILE)] == ["O"]

    def test_remove_player_clears_slot(self):
        world = self._world()
        pid = world.allocate_actor_id()
        world.add_actor(Actor(pid, "P", Vector2(1, 1), Capability.PLAYER))
        world.remove_actor(pid)
        assert world.player is None
