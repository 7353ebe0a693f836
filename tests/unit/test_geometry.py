"""Unit tests for geometric helper functions.

Tests cover:
- Euclidean and perpendicular distances
- Angles at a vertex
- Bounding box and centroid
- Point-in-polygon testing and scanline crossings
- Regular polygon vertex synthesis
"""

import math

import pytest

from shapesnap.core.geometry import (
    angle_at,
    bounding_box,
    centroid,
    distance,
    perpendicular_distance,
    inside_by_crossings,
    point_in_polygon,
    regular_polygon_vertices,
    scanline_crossings,
)
from shapesnap.domain import Bounds, Point


class TestDistances:
    """Tests for distance helpers."""

    def test_distance_pythagorean(self):
        """A 3-4-5 triangle has a hypotenuse of 5."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_perpendicular_distance_horizontal_line(self):
        """Distance to a horizontal line is the vertical offset."""
        assert perpendicular_distance(Point(5, 5), Point(0, 0), Point(10, 0)) == pytest.approx(5.0)

    def test_perpendicular_distance_extends_past_segment(self):
        """The line is infinite, so points beyond the endpoints still project onto it."""
        assert perpendicular_distance(Point(50, 3), Point(0, 0), Point(10, 0)) == pytest.approx(3.0)

    def test_perpendicular_distance_point_on_line(self):
        """Collinear points are at distance 0."""
        assert perpendicular_distance(Point(5, 5), Point(0, 0), Point(10, 10)) == pytest.approx(0.0)

    def test_perpendicular_distance_degenerate_line(self):
        """Coincident line points fall back to the Euclidean distance."""
        d = perpendicular_distance(Point(3, 4), Point(0, 0), Point(0, 0))

        assert d == 5.0
        assert not math.isnan(d)


class TestAngleAt:
    """Tests for vertex angle measurement."""

    def test_right_angle(self):
        assert angle_at(Point(0, 0), Point(10, 0), Point(10, 10)) == pytest.approx(90.0)

    def test_straight_continuation(self):
        assert angle_at(Point(0, 0), Point(10, 0), Point(20, 0)) == pytest.approx(180.0)

    def test_full_reversal(self):
        """Doubling back on the same line gives 0 degrees."""
        assert angle_at(Point(0, 0), Point(10, 0), Point(0, 0)) == pytest.approx(0.0)

    def test_zero_length_vector_is_straight(self):
        """A repeated sample cannot form a corner."""
        assert angle_at(Point(10, 0), Point(10, 0), Point(20, 5)) == 180.0

    def test_acute_angle(self):
        angle = angle_at(Point(10, 0), Point(0, 0), Point(10, 10))
        assert angle == pytest.approx(45.0)


class TestBoundsAndCentroid:
    """Tests for bounding box and centroid."""

    def test_bounding_box(self):
        points = [Point(10, 20), Point(50, 5), Point(30, 40)]

        assert bounding_box(points) == Bounds(10, 5, 40, 35)

    def test_bounding_box_empty(self):
        """Empty input yields a zero-sized box at the origin."""
        assert bounding_box([]) == Bounds(0.0, 0.0, 0.0, 0.0)

    def test_bounding_box_single_point(self):
        b = bounding_box([Point(7, 9)])

        assert (b.x, b.y, b.width, b.height) == (7, 9, 0, 0)

    def test_centroid_is_arithmetic_mean(self):
        """Duplicate points pull the centroid, since it is not area weighted."""
        points = [Point(0, 0), Point(0, 0), Point(30, 0)]

        assert centroid(points) == Point(10.0, 0.0)

    def test_centroid_empty(self):
        assert centroid([]) == Point(0.0, 0.0)


class TestPointInPolygon:
    """Tests for ray casting containment."""

    @pytest.fixture
    def square(self):
        return [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]

    def test_inside(self, square):
        assert point_in_polygon(Point(50, 50), square)

    def test_outside(self, square):
        assert not point_in_polygon(Point(150, 50), square)
        assert not point_in_polygon(Point(-1, 50), square)

    def test_concave_notch(self):
        """Points in the notch of a U shape are outside."""
        u_shape = [
            Point(0, 0),
            Point(30, 0),
            Point(30, 70),
            Point(70, 70),
            Point(70, 0),
            Point(100, 0),
            Point(100, 100),
            Point(0, 100),
        ]

        assert not point_in_polygon(Point(50, 30), u_shape)
        assert point_in_polygon(Point(15, 30), u_shape)
        assert point_in_polygon(Point(50, 85), u_shape)

    def test_repeated_closing_vertex(self, square):
        """A closed outline that repeats its first vertex behaves the same."""
        closed = [*square, square[0]]

        assert point_in_polygon(Point(50, 50), closed)
        assert not point_in_polygon(Point(150, 50), closed)

    def test_too_few_vertices(self):
        assert not point_in_polygon(Point(0, 0), [Point(-1, -1), Point(1, 1)])


class TestScanlineCrossings:
    """Tests for whole-row even-odd membership."""

    @pytest.fixture
    def u_shape(self):
        return [
            Point(0, 0),
            Point(30, 0),
            Point(30, 70),
            Point(70, 70),
            Point(70, 0),
            Point(100, 0),
            Point(100, 100),
            Point(0, 100),
        ]

    def test_crossings_sorted(self, u_shape):
        assert scanline_crossings(u_shape, 30) == [0, 30, 70, 100]

    def test_row_above_notch(self, u_shape):
        assert scanline_crossings(u_shape, 85) == [0, 100]

    def test_outside_vertical_extent(self, u_shape):
        assert scanline_crossings(u_shape, 150) == []

    def test_agrees_with_ray_casting(self, u_shape):
        for y in range(-5, 106, 7):
            crossings = scanline_crossings(u_shape, y)
            for x in range(-5, 106, 7):
                sample = Point(x, y)
                assert inside_by_crossings(x, crossings) == point_in_polygon(sample, u_shape)

    def test_too_few_vertices(self):
        assert scanline_crossings([Point(0, 0), Point(10, 10)], 5) == []


class TestRegularPolygonVertices:
    """Tests for regular polygon synthesis."""

    def test_first_vertex_points_up(self):
        """Canvas y grows downwards, so "up" is negative y."""
        vertices = regular_polygon_vertices(Point(0, 0), 10, 3)

        assert len(vertices) == 3
        assert vertices[0].x == pytest.approx(0.0, abs=1e-9)
        assert vertices[0].y == pytest.approx(-10.0)

    def test_vertices_on_circle(self):
        center = Point(50, 50)
        for vertex in regular_polygon_vertices(center, 20, 6):
            assert distance(vertex, center) == pytest.approx(20.0)

    def test_equilateral(self):
        a, b, c = regular_polygon_vertices(Point(0, 0), 10, 3)

        assert distance(a, b) == pytest.approx(distance(b, c))
        assert distance(b, c) == pytest.approx(distance(c, a))
