"""Feature extraction for recognition.

This module turns a point sequence into the FeatureBundle both classifiers
work from:
- Bounding box and centroid
- Closure (do the endpoints meet?)
- Aspect ratio
- Circularity (how constant the distance to the centroid is)
- Corners, detected with a sliding look-ahead window

Corners are found twice per stroke, on the simplified points and on the
raw samples, because simplification removes exactly the points that mark
a sharp turn.
"""

from collections.abc import Sequence

from shapesnap.config import GeometryConfig
from shapesnap.core.geometry import angle_at, bounding_box, centroid, distance
from shapesnap.domain import Corner, FeatureBundle, Point


class GeometryAnalyzer:
    """Computes the feature bundle of a stroke.

    The analyzer holds only its configuration and keeps no state between
    calls.
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the analyzer.

        Args:
            config: Geometry tolerances (defaults when omitted)
        """
        self.config = config or GeometryConfig()

    def analyze(
        self,
        points: Sequence[Point],
        raw_points: Sequence[Point] | None = None,
    ) -> FeatureBundle:
        """Compute the features of a stroke.

        Args:
            points: Simplified points of the stroke
            raw_points: Original samples; when given, corners are also
                detected on them and preferred by the classifiers

        Returns:
            FeatureBundle for the stroke
        """
        bounds = bounding_box(points)
        center = centroid(points)

        aspect_ratio = max(bounds.width, 1.0) / max(bounds.height, 1.0)

        corners_raw = None
        if raw_points is not None:
            corners_raw = tuple(self.detect_corners(raw_points))

        return FeatureBundle(
            bounds=bounds,
            centroid=center,
            is_closed=self.is_closed(points),
            aspect_ratio=aspect_ratio,
            circularity=self.circularity(points, center),
            corners=tuple(self.detect_corners(points)),
            corners_raw=corners_raw,
        )

    def is_closed(self, points: Sequence[Point]) -> bool:
        """Check whether the endpoints of a stroke nearly meet.

        Args:
            points: Points of the stroke

        Returns:
            True if there are at least 3 points and the endpoint gap is
            below the closure threshold
        """
        if len(points) < 3:
            return False
        return distance(points[0], points[-1]) < self.config.closure_threshold

    @staticmethod
    def circularity(points: Sequence[Point], center: Point | None = None) -> float:
        """Score how circular a point set is.

        Computes each point's radius from the centroid and returns
        ``1 - variance / mean**2`` clipped at 0. Points on a circle score
        close to 1; a straight line lands well below.

        Args:
            points: Points to score
            center: Precomputed centroid (computed when omitted)

        Returns:
            Circularity in [0, 1]. Empty input, or points that all sit on
            the centroid, score 0.
        """
        if not points:
            return 0.0
        if center is None:
            center = centroid(points)

        radii = [distance(p, center) for p in points]
        mean_radius = sum(radii) / len(radii)
        if mean_radius == 0:
            return 0.0

        variance = sum((r - mean_radius) ** 2 for r in radii) / len(radii)
        return max(0.0, 1.0 - variance / (mean_radius * mean_radius))

    def detect_corners(self, points: Sequence[Point]) -> list[Corner]:
        """Find sharp direction changes along a point sequence.

        Slides a window of half-width ``corner_look_ahead`` over the points
        (skipping the first and last ``corner_look_ahead``) and measures the
        angle at each centre point. Angles below the corner threshold are
        corners. A candidate within ``2 * corner_look_ahead`` indices of an
        already recorded corner is dropped, so the earliest detection wins.

        Args:
            points: Points to scan

        Returns:
            Corners in index order
        """
        look_ahead = self.config.corner_look_ahead
        if len(points) < 2 * look_ahead + 1:
            return []

        threshold = self.config.corner_angle_threshold
        corners: list[Corner] = []

        for i in range(look_ahead, len(points) - look_ahead):
            angle = angle_at(points[i - look_ahead], points[i], points[i + look_ahead])
            if angle >= threshold:
                continue

            if any(abs(corner.index - i) < look_ahead * 2 for corner in corners):
                continue

            corners.append(Corner(index=i, point=points[i], angle=angle))

        return corners
