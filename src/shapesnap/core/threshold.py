"""Rule cascade classifier.

Each rule is a predicate over the feature bundle that either produces a
shape or passes. Rules run in a fixed order and the first match wins:

1. line      - open and thin or not round, or only two points
2. circle    - closed, very round, nearly square bounds, few corners
3. rectangle - closed, 2-6 corners, sane aspect ratio
4. triangle  - closed, 2-5 corners, not too round

Hand-drawn circles, rectangles and triangles overlap heavily in corner
count. The circularity gate on the circle rule claims round strokes before
any corner-based rule sees them, and the rectangle rule refuses
two-corner strokes that are still fairly round. Changing the order changes
results for ambiguous strokes.

With ``extended_shapes`` enabled, ellipse, diamond and polygon rules join
the cascade.
"""

from collections.abc import Callable, Sequence

from shapesnap.config import ThresholdConfig
from shapesnap.core.geometry import distance
from shapesnap.domain import (
    Corner,
    Ellipse,
    FeatureBundle,
    Line,
    Point,
    Polygon,
    Rectangle,
    ShapeDescriptor,
)

Rule = Callable[[Sequence[Point], FeatureBundle], ShapeDescriptor | None]

DEFAULT_RULES: tuple[str, ...] = ("line", "circle", "rectangle", "triangle")
EXTENDED_RULES: tuple[str, ...] = (
    "line",
    "circle",
    "ellipse",
    "diamond",
    "rectangle",
    "triangle",
    "polygon",
)


class ThresholdClassifier:
    """Classifies strokes with an ordered cascade of threshold rules.

    Example:
        classifier = ThresholdClassifier(ThresholdConfig())
        shape = classifier.classify(simplified, features)
    """

    def __init__(
        self,
        config: ThresholdConfig | None = None,
        rule_order: Sequence[str] | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            config: Cascade thresholds (defaults when omitted)
            rule_order: Names of the rules to run, in order. Defaults to the
                basic cascade, or the extended one when
                ``config.extended_shapes`` is set.

        Raises:
            ValueError: If a rule name is unknown
        """
        self.config = config or ThresholdConfig()

        if rule_order is None:
            rule_order = EXTENDED_RULES if self.config.extended_shapes else DEFAULT_RULES

        available: dict[str, Rule] = {
            "line": self.recognize_line,
            "circle": self.recognize_circle,
            "ellipse": self.recognize_ellipse,
            "diamond": self.recognize_diamond,
            "rectangle": self.recognize_rectangle,
            "triangle": self.recognize_triangle,
            "polygon": self.recognize_polygon,
        }
        unknown = [name for name in rule_order if name not in available]
        if unknown:
            raise ValueError(f"Unknown rules: {', '.join(unknown)}")

        self.rule_order: tuple[str, ...] = tuple(rule_order)
        self._rules = [available[name] for name in self.rule_order]

    def classify(
        self,
        points: Sequence[Point],
        features: FeatureBundle,
    ) -> ShapeDescriptor | None:
        """Run the cascade and return the first rule's shape.

        Args:
            points: Simplified points of the stroke
            features: Features of the stroke

        Returns:
            Shape from the first matching rule, or None
        """
        for rule in self._rules:
            shape = rule(points, features)
            if shape is not None:
                return shape
        return None

    def recognize_line(self, points: Sequence[Point], features: FeatureBundle) -> Line | None:
        cfg = self.config
        extreme_aspect = (
            features.aspect_ratio > cfg.line_aspect_ratio_min
            or features.aspect_ratio < 1 / cfg.line_aspect_ratio_min
        )
        is_line_like = not features.is_closed and (
            features.circularity < cfg.line_circularity_max or extreme_aspect
        )

        if is_line_like or len(points) == 2:
            start, end = points[0], points[-1]
            return Line(start.x, start.y, end.x, end.y)
        return None

    def recognize_circle(self, points: Sequence[Point], features: FeatureBundle) -> Ellipse | None:
        cfg = self.config
        if not features.is_closed:
            return None
        if features.circularity < cfg.circle_circularity_min:
            return None
        # Three or more corners belong to rectangles and triangles
        if features.corner_count > cfg.circle_corners_max:
            return None
        if not cfg.circle_aspect_min <= features.aspect_ratio <= cfg.circle_aspect_max:
            return None

        center = features.centroid
        radius = sum(distance(p, center) for p in points) / len(points)
        return Ellipse(center.x, center.y, radius, radius)

    def recognize_ellipse(self, points: Sequence[Point], features: FeatureBundle) -> Ellipse | None:
        cfg = self.config
        if not features.is_closed:
            return None
        if features.circularity < cfg.ellipse_circularity_min:
            return None
        if features.corner_count > cfg.circle_corners_max:
            return None

        aspect = features.aspect_ratio
        elongated = aspect < 0.8 or aspect > 1.2
        not_too_extreme = 0.3 < aspect < 3.0
        if not (elongated and not_too_extreme):
            return None

        rx = features.width / 2
        ry = features.height / 2
        return Ellipse(features.bounds.x + rx, features.bounds.y + ry, rx, ry)

    def recognize_diamond(self, points: Sequence[Point], features: FeatureBundle) -> Polygon | None:
        cfg = self.config
        if not features.is_closed or features.corner_count != 4:
            return None
        if not 0.7 <= features.aspect_ratio <= 1.3:
            return None

        # Right angles make it a rectangle instead
        not_right_angles = any(
            corner.angle < cfg.rect_corner_angle_min or corner.angle > cfg.rect_corner_angle_max
            for corner in features.effective_corners
        )
        if not not_right_angles:
            return None

        radius = max(features.width, features.height) / 2
        center = features.centroid
        return Polygon(center.x, center.y, radius, radius, 4, rotation=45.0)

    def recognize_rectangle(self, points: Sequence[Point], features: FeatureBundle) -> Rectangle | None:
        cfg = self.config
        if not features.is_closed:
            return None

        # Rough corners under-detect, so the accepted range is wide
        count = features.corner_count
        has_rect_corners = cfg.rect_corners_min <= count <= cfg.rect_corners_max

        if count == 2 and features.circularity > cfg.rect_two_corner_circularity_max:
            return None

        reasonable_aspect = cfg.rect_aspect_min < features.aspect_ratio < cfg.rect_aspect_max

        if has_rect_corners and reasonable_aspect:
            b = features.bounds
            return Rectangle(b.x, b.y, b.width, b.height)
        return None

    def recognize_triangle(self, points: Sequence[Point], features: FeatureBundle) -> Polygon | None:
        cfg = self.config
        if not features.is_closed:
            return None

        has_three_ish_corners = cfg.triangle_corners_min <= features.corner_count <= cfg.triangle_corners_max
        not_too_round = features.circularity < cfg.triangle_circularity_max

        if has_three_ish_corners and not_too_round:
            center = features.centroid
            radius = _max_radius(points, center)
            return Polygon(center.x, center.y, radius, radius, 3)
        return None

    def recognize_polygon(self, points: Sequence[Point], features: FeatureBundle) -> Polygon | None:
        cfg = self.config
        count = features.corner_count
        if not features.is_closed:
            return None
        if not cfg.polygon_corners_min <= count <= cfg.polygon_corners_max:
            return None
        if not corners_evenly_spaced(features.effective_corners):
            return None

        center = features.centroid
        outer = _max_radius(points, center)
        return Polygon(center.x, center.y, outer * cfg.polygon_inner_ratio, outer, count)


def corners_evenly_spaced(corners: Sequence[Corner], tolerance: float = 0.5) -> bool:
    """Check that consecutive corners are roughly equally far apart.

    Gaps are index distances between neighbouring corners. The gap from the
    last corner back round to the first is not counted.

    Args:
        corners: Corners in index order
        tolerance: Allowed relative deviation of each gap from the mean

    Returns:
        True if every gap lies within the tolerance band
    """
    if len(corners) < 2:
        return False

    gaps = [nxt.index - cur.index for cur, nxt in zip(corners, corners[1:])]
    mean_gap = sum(gaps) / len(gaps)

    return all(
        mean_gap * (1 - tolerance) <= gap <= mean_gap * (1 + tolerance)
        for gap in gaps
    )


def _max_radius(points: Sequence[Point], center: Point) -> float:
    return max((distance(p, center) for p in points), default=0.0)

