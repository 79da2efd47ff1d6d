"""
Unit tests for Neighborhood sampling.
"""

from unittest.mock import Mock

import pytest

from autotile.core.direction import Direction
from autotile.core.neighborhood import Neighborhood
from autotile.core.tilemap import Position, Tilemap

D = Direction


def make_tilemap(tile, *offsets, layer=0):
    """Tilemap with tile placed at each (dx, dy) offset around the origin."""
    tilemap = Tilemap()
    for dx, dy in offsets:
        tilemap.set_tile(Position(dx, dy, layer), tile)
    return tilemap


class TestBuild:
    """Tests for Neighborhood.build."""

    def test_up_and_down(self):
        tile = object()
        tilemap = make_tilemap(tile, (0, 1), (0, -1))

        n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))

        assert n.has(D.UP)
        assert n.has(D.DOWN)
        assert not n.has(D.RIGHT)

    def test_diagonal_neighbor(self):
        tile = object()
        tilemap = make_tilemap(tile, (0, 1), (-1, 0), (1, 1))

        n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))

        assert n.has(D.UP)
        assert n.has(D.LEFT)
        assert n.has(D.UP_RIGHT)
        assert not n.has(D.RIGHT)

    def test_each_offset_maps_to_its_direction(self):
        tile = object()
        for d in D:
            tilemap = make_tilemap(tile, d.offset)
            n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))
            assert [other for other in D if n.has(other)] == [d]

    def test_different_tile_is_not_a_neighbor(self):
        tile = object()
        other = object()
        tilemap = make_tilemap(other, (0, 1), (1, 0))

        n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))

        assert n.flags == 0

    def test_empty_cells(self):
        n = Neighborhood.build(object(), Tilemap(), Position(5, 5, 0))
        assert n == Neighborhood()

    def test_relative_to_position(self):
        tile = object()
        tilemap = Tilemap()
        tilemap.set_tile(Position(10, 21, 0), tile)

        n = Neighborhood.build(tile, tilemap, Position(10, 20, 0))

        assert n.has(D.UP)
        assert n.flags == Neighborhood.from_directions(D.UP).flags

    def test_other_layer_ignored(self):
        tile = object()
        tilemap = make_tilemap(tile, (0, 1), layer=1)

        n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))

        assert not n.has(D.UP)

    def test_center_cell_not_sampled(self):
        tilemap = Mock()
        tilemap.get_tile.return_value = None

        Neighborhood.build(object(), tilemap, Position(3, 4, 0))

        queried = {call.args[0] for call in tilemap.get_tile.call_args_list}
        assert len(queried) == 8
        assert Position(3, 4, 0) not in queried

    def test_accepts_mocked_grid(self):
        tile = object()
        tiles = {Position(0, 1, 0): tile, Position(-1, -1, 0): tile}
        tilemap = Mock()
        tilemap.get_tile.side_effect = lambda pos: tiles.get(pos)

        n = Neighborhood.build(tile, tilemap, Position(0, 0, 0))

        assert n.has(D.UP)
        assert n.has(D.DOWN_LEFT)
        assert not n.has(D.DOWN)


class TestFlags:
    """Tests for raw flag construction and queries."""

    def test_scan_order_bits(self):
        assert Neighborhood.from_flags(0b1).has(D.UP_RIGHT)
        assert Neighborhood.from_flags(0b10).has(D.UP)
        assert Neighborhood.from_flags(0b100).has(D.UP_LEFT)
        assert Neighborhood.from_flags(0b1000).has(D.RIGHT)
        assert Neighborhood.from_flags(0b10000).has(D.LEFT)
        assert Neighborhood.from_flags(0b100000).has(D.DOWN_RIGHT)
        assert Neighborhood.from_flags(0b1000000).has(D.DOWN)
        assert Neighborhood.from_flags(0b10000000).has(D.DOWN_LEFT)

    def test_full(self):
        n = Neighborhood.from_flags(0xFF)
        assert all(n.has(d) for d in D)

    def test_from_directions(self):
        n = Neighborhood.from_directions(D.LEFT, D.DOWN)
        assert n.has(D.LEFT)
        assert n.has(D.DOWN)
        assert n.flags == 0b1010000

    def test_unknown_direction_is_absent(self):
        n = Neighborhood.from_flags(0xFF)
        assert not n.has("up")

    def test_out_of_range_flags_raise(self):
        with pytest.raises(ValueError, match="out of range"):
            Neighborhood.from_flags(256)
        with pytest.raises(ValueError, match="out of range"):
            Neighborhood.from_flags(-1)

    def test_equality_and_hash(self):
        a = Neighborhood.from_directions(D.UP, D.RIGHT)
        b = Neighborhood.from_directions(D.RIGHT, D.UP)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Neighborhood.from_directions(D.UP)

    def test_repr_shows_bits(self):
        assert repr(Neighborhood.from_flags(0b101)) == "Neighborhood(0b00000101)"
