"""Geometric operations shared by the recognition pipeline.

This module provides core mathematical utilities for:
- Euclidean and perpendicular distances
- Angle at a vertex
- Bounding box and centroid of a point set
- Point-in-polygon testing (ray casting algorithm) and scanline crossings
- Regular polygon vertex synthesis

All functions are pure and stateless.
"""

import math
from bisect import bisect_right
from collections.abc import Sequence

from shapesnap.domain import Bounds, Point


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from a point to the infinite line through two points.

    When the two line points coincide there is no line, and the distance
    to that single point is returned instead.

    Args:
        point: The point to measure
        line_start: First point on the line
        line_end: Second point on the line

    Returns:
        Perpendicular distance, never NaN

    Examples:
        >>> perpendicular_distance(Point(5, 5), Point(0, 0), Point(10, 0))
        5.0
        >>> perpendicular_distance(Point(3, 4), Point(0, 0), Point(0, 0))
        5.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y

    if dx == 0 and dy == 0:
        return distance(point, line_start)

    # Twice the triangle area over the base length
    numerator = abs(dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x)
    return numerator / math.sqrt(dx * dx + dy * dy)


def angle_at(p1: Point, vertex: Point, p3: Point) -> float:
    """Angle at ``vertex`` between the vectors to ``p1`` and ``p3``.

    Args:
        p1: Point before the vertex
        vertex: The vertex
        p3: Point after the vertex

    Returns:
        Angle in degrees in [0, 180]. A zero-length vector counts as a
        straight continuation (180).

    Examples:
        >>> round(angle_at(Point(0, 0), Point(10, 0), Point(10, 10)))
        90
    """
    v1x = p1.x - vertex.x
    v1y = p1.y - vertex.y
    v2x = p3.x - vertex.x
    v2y = p3.y - vertex.y

    mag1 = math.hypot(v1x, v1y)
    mag2 = math.hypot(v2x, v2y)
    if mag1 == 0 or mag2 == 0:
        return 180.0

    cos_angle = (v1x * v2x + v1y * v2y) / (mag1 * mag2)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos_angle))))


def bounding_box(points: Sequence[Point]) -> Bounds:
    """Axis-aligned bounds of a point set.

    Returns:
        Bounds of the points; a zero-sized box at the origin when empty
    """
    if not points:
        return Bounds(0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, min_y = min(xs), min(ys)
    return Bounds(x=min_x, y=min_y, width=max(xs) - min_x, height=max(ys) - min_y)


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of a point set (not area weighted).

    Returns:
        Mean point; the origin when empty
    """
    if not points:
        return Point(0.0, 0.0)

    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges (even-odd rule). Horizontal edges never satisfy the
    straddle test, so they are skipped without dividing by zero. Works for
    concave and self-intersecting outlines; the polygon is implicitly
    closed.

    Args:
        point: The point to test
        polygon: Vertices of the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> point_in_polygon(Point(1, 1), square)
        True
        >>> point_in_polygon(Point(3, 3), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def scanline_crossings(polygon: Sequence[Point], y: float) -> list[float]:
    """Sorted x positions where a horizontal line crosses polygon edges.

    Uses the same straddle test and intersection formula as
    ``point_in_polygon``, so a point ``(x, y)`` is inside exactly when an
    odd number of crossings lie strictly to its right. Rasterizing a whole
    row this way costs one pass over the edges instead of one per cell.

    Args:
        polygon: Vertices of the polygon boundary, implicitly closed
        y: Height of the scanline

    Returns:
        Crossing x positions in ascending order; empty for fewer than
        three vertices
    """
    n = len(polygon)
    if n < 3:
        return []

    crossings = []
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if (yi > y) != (yj > y):
            crossings.append((xj - xi) * (y - yi) / (yj - yi) + xi)

        j = i

    crossings.sort()
    return crossings


def inside_by_crossings(x: float, crossings: Sequence[float]) -> bool:
    """Even-odd membership of ``x`` on a scanline with sorted crossings.

    Examples:
        >>> inside_by_crossings(1.0, [0.0, 2.0])
        True
        >>> inside_by_crossings(3.0, [0.0, 2.0])
        False
    """
    return (len(crossings) - bisect_right(crossings, x)) % 2 == 1


def regular_polygon_vertices(
    center: Point,
    radius: float,
    sides: int,
    start_angle: float = -math.pi / 2,
) -> list[Point]:
    """Vertices of a regular polygon.

    Args:
        center: Polygon centre
        radius: Distance from the centre to each vertex
        sides: Number of vertices
        start_angle: Angle of the first vertex in radians; the default
            points it straight up in canvas space (y grows downwards)

    Returns:
        List of ``sides`` vertices spaced evenly around the centre
    """
    return [
        Point(
            center.x + math.cos(start_angle + (i / sides) * math.pi * 2) * radius,
            center.y + math.sin(start_angle + (i / sides) * math.pi * 2) * radius,
        )
        for i in range(sides)
    ]
