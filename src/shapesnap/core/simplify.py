"""Ramer-Douglas-Peucker point reduction.

Hand-drawn strokes carry far more samples than their shape needs. The
simplifier keeps only the points that deviate from the chord between their
neighbours' endpoints by more than a tolerance.
"""

from collections.abc import Sequence

from shapesnap.core.geometry import perpendicular_distance
from shapesnap.domain import Point


def simplify_points(points: Sequence[Point], tolerance: float = 2.0) -> list[Point]:
    """Reduce a point sequence with the Ramer-Douglas-Peucker algorithm.

    Finds the interior point farthest from the chord between the first and
    last point. If it lies farther than ``tolerance`` the sequence is split
    there and both halves are simplified recursively; otherwise the whole
    run collapses to its two endpoints. The first and last points are
    always kept, and the result is deterministic for a given input.

    Args:
        points: Ordered points of a stroke
        tolerance: Maximum allowed deviation in canvas units

    Returns:
        New list with the retained points, in original order. Inputs of two
        points or fewer come back unchanged.

    Examples:
        >>> line = [Point(0, 0), Point(10, 10), Point(20, 20)]
        >>> simplify_points(line, 1.0)
        [Point(x=0, y=0), Point(x=20, y=20)]
    """
    if len(points) <= 2:
        return list(points)

    line_start = points[0]
    line_end = points[-1]

    max_distance = 0.0
    max_index = 0
    for i in range(1, len(points) - 1):
        d = perpendicular_distance(points[i], line_start, line_end)
        if d > max_distance:
            max_distance = d
            max_index = i

    if max_distance > tolerance:
        left = simplify_points(points[: max_index + 1], tolerance)
        right = simplify_points(points[max_index:], tolerance)
        # The split point ends ``left`` and starts ``right``
        return left[:-1] + right

    return [line_start, line_end]
