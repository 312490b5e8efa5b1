"""
Tests for hexagonal vent-hole tiling.

Pure math - no geometry building, all tests are fast.
"""

import math
import pytest

from ventadapter.calculator.hex_grid import (
    Cube,
    Offset,
    ORIGIN,
    DIRECTIONS,
    cube_add,
    cube_scale,
    neighbor,
    hex_distance,
    to_offset,
    to_planar,
    ring,
    spiral,
    estimate_ring_count,
    required_ring_count,
    tile,
)


class TestCube:
    """Tests for the cube coordinate type."""

    def test_zero_sum_accepted(self):
        cc = Cube(2, -3, 1)
        assert (cc.q, cc.r, cc.s) == (2, -3, 1)

    def test_nonzero_sum_rejected(self):
        with pytest.raises(ValueError):
            Cube(1, 1, 1)

    def test_add_and_scale(self):
        assert cube_add(Cube(1, -1, 0), Cube(0, 1, -1)) == Cube(1, 0, -1)
        assert cube_scale(Cube(-1, 0, 1), 3) == Cube(-3, 0, 3)

    def test_hex_distance(self):
        assert hex_distance(ORIGIN, ORIGIN) == 0
        assert hex_distance(ORIGIN, Cube(2, -1, -1)) == 2
        assert hex_distance(Cube(1, -1, 0), Cube(-2, 0, 2)) == 3


class TestNeighbor:
    """Tests for neighbor() and the direction table."""

    def test_direction_order(self):
        """Neighbours of the origin are the six unit vectors in fixed order."""
        expected = [
            (1, -1, 0), (1, 0, -1), (0, 1, -1),
            (-1, 1, 0), (-1, 0, 1), (0, -1, 1),
        ]
        assert [tuple(neighbor(ORIGIN, d)) for d in range(6)] == expected

    def test_directions_sum_to_zero(self):
        for d in DIRECTIONS:
            assert d.q + d.r + d.s == 0

    def test_neighbor_is_one_step_away(self):
        cc = Cube(3, -5, 2)
        for d in range(6):
            assert hex_distance(cc, neighbor(cc, d)) == 1

    def test_invalid_direction(self):
        with pytest.raises(IndexError):
            neighbor(ORIGIN, 6)
        with pytest.raises(IndexError):
            neighbor(ORIGIN, -1)


class TestPlanar:
    """Tests for offset and planar conversion."""

    def test_to_offset(self):
        assert to_offset(ORIGIN) == Offset(0, 0)
        assert to_offset(Cube(1, -1, 0)) == Offset(1, 0)
        assert to_offset(Cube(-1, 0, 1)) == Offset(-1, 0)
        assert to_offset(Cube(0, 1, -1)) == Offset(0, -1)
        assert to_offset(Cube(2, -3, 1)) == Offset(2, 2)

    def test_origin_maps_to_origin(self):
        assert to_planar(ORIGIN, 3.6) == (0.0, 0.0)

    def test_known_positions(self):
        x, y = to_planar(Cube(0, 1, -1), 2.0)
        assert x == pytest.approx(0.0)
        assert y == pytest.approx(-2.0)

        x, y = to_planar(Cube(1, -1, 0), 2.0)
        assert x == pytest.approx(math.sqrt(3))
        assert y == pytest.approx(1.0)

    @pytest.mark.parametrize("width", [1.0, 3.6, 10.0])
    def test_neighbours_one_width_apart(self, width):
        """Every neighbour centre lies exactly one cell pitch away."""
        for cc in spiral(ORIGIN, 3):
            x0, y0 = to_planar(cc, width)
            for d in range(6):
                x1, y1 = to_planar(neighbor(cc, d), width)
                assert math.hypot(x1 - x0, y1 - y0) == pytest.approx(width)

    def test_injective(self):
        cells = spiral(ORIGIN, 6)
        points = {tuple(round(v, 9) for v in to_planar(cc, 3.6)) for cc in cells}
        assert len(points) == len(cells)


class TestRing:
    """Tests for ring()."""

    def test_radius_zero_is_center(self):
        center = Cube(2, -1, -1)
        assert ring(center, 0) == [center]

    def test_negative_radius_is_empty(self):
        assert ring(ORIGIN, -1) == []

    @pytest.mark.parametrize("radius", [1, 2, 3, 5, 8])
    def test_ring_size_and_distance(self, radius):
        center = Cube(1, 2, -3)
        cells = ring(center, radius)
        assert len(cells) == 6 * radius
        assert len(set(cells)) == len(cells)
        assert all(hex_distance(center, cc) == radius for cc in cells)

    @pytest.mark.parametrize("radius", [1, 4, 7])
    def test_ring_is_continuous(self, radius):
        """Consecutive cells (wrapping around) are neighbours."""
        cells = ring(ORIGIN, radius)
        for a, b in zip(cells, cells[1:] + cells[:1]):
            assert hex_distance(a, b) == 1

    def test_ring_starts_in_direction_four(self):
        assert ring(ORIGIN, 3)[0] == Cube(-3, 0, 3)

    def test_ring_one_is_all_neighbours(self):
        assert set(ring(ORIGIN, 1)) == set(DIRECTIONS)


class TestSpiral:
    """Tests for spiral()."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
    def test_spiral_size(self, n):
        cells = spiral(ORIGIN, n)
        assert len(cells) == 1 + 3 * n * (n + 1)
        assert len(set(cells)) == len(cells)

    def test_spiral_starts_at_center(self):
        center = Cube(-2, 1, 1)
        assert spiral(center, 2)[0] == center

    def test_spiral_distance_nondecreasing(self):
        distances = [hex_distance(ORIGIN, cc) for cc in spiral(ORIGIN, 6)]
        assert distances == sorted(distances)

    def test_spiral_covers_disk(self):
        """Every cell within N steps appears."""
        cells = set(spiral(ORIGIN, 4))
        for q in range(-4, 5):
            for r in range(-4, 5):
                cc = Cube(q, r, -q - r)
                if hex_distance(ORIGIN, cc) <= 4:
                    assert cc in cells


class TestTile:
    """Tests for tile()."""

    def test_stock_grille(self):
        """80mm fan grille: origin first, everything inside the fit limit."""
        points = tile(width=3.6, radius=38.5)
        assert points[0] == (0.0, 0.0)
        assert all(math.hypot(x, y) < 36.7 for x, y in points)

    def test_first_ring_follows_center(self):
        points = tile(width=3.6, radius=38.5)
        for x, y in points[1:7]:
            assert math.hypot(x, y) == pytest.approx(3.6)

    @pytest.mark.parametrize("width,radius", [
        (3.6, 38.5), (3.0, 20.0), (5.0, 60.0), (1.0, 7.3), (4.0, 18.5),
    ])
    def test_tile_is_complete(self, width, radius):
        """Tiling matches a brute-force filter over a much larger spiral."""
        limit = radius - width / 2
        brute = [
            to_planar(cc, width)
            for cc in spiral(ORIGIN, int(2 * radius / width) + 5)
        ]
        expected = {p for p in brute if math.hypot(*p) < limit}
        assert set(tile(width, radius)) == expected

    def test_cell_wider_than_disk(self):
        assert tile(width=10.0, radius=4.0) == []

    def test_single_cell(self):
        assert tile(width=3.6, radius=2.0) == [(0.0, 0.0)]

    @pytest.mark.parametrize("width,radius", [
        (0, 10), (-1.0, 10), (3.6, 0), (3.6, -5.0),
    ])
    def test_degenerate_inputs_give_empty(self, width, radius):
        assert tile(width, radius) == []


class TestRingEstimate:
    """The ring-count estimate must never undershoot."""

    def test_stock_estimate(self):
        assert estimate_ring_count(3.6, 38.5) == 15

    def test_stock_required(self):
        assert required_ring_count(3.6, 38.5) == 11

    def test_degenerate(self):
        assert estimate_ring_count(0, 10) == 0
        assert estimate_ring_count(3.6, 0) == 0
        assert required_ring_count(-1, 10) == 0

    def test_nothing_fits(self):
        assert required_ring_count(10.0, 4.0) == 0

    @pytest.mark.parametrize("width", [0.5, 1.0, 2.0, 3.6, 5.0, 8.0])
    @pytest.mark.parametrize("radius", [1.0, 4.9, 10.0, 17.3, 38.5, 62.0])
    def test_estimate_is_upper_bound(self, width, radius):
        assert estimate_ring_count(width, radius) >= required_ring_count(width, radius)
