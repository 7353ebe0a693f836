"""Template overlap classifier.

Instead of rules over features, this strategy asks how well an idealized
shape covers the area the user drew:

1. A stroke that hugs the chord between its endpoints is a line.
2. Closed strokes are compared against circle, rectangle and triangle
   templates sized from the stroke's bounds and centroid.
3. Stroke and template are sampled on a shared grid; the score is the
   Jaccard index (intersection over union) of the cells inside each.
4. The best template above its own threshold wins.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Protocol

from shapesnap.config import CoverageConfig
from shapesnap.core.geometry import (
    bounding_box,
    inside_by_crossings,
    perpendicular_distance,
    point_in_polygon,
    regular_polygon_vertices,
    scanline_crossings,
)
from shapesnap.domain import (
    Ellipse,
    FeatureBundle,
    Line,
    Point,
    Polygon,
    Rectangle,
    ShapeDescriptor,
)


class TemplateShape(Protocol):
    """An idealized candidate shape with a membership test."""

    name: ClassVar[str]

    def contains(self, point: Point) -> bool: ...

    def to_shape(self) -> ShapeDescriptor: ...


@dataclass(frozen=True)
class CircleTemplate:
    """Circle template; boundary points count as inside."""

    name: ClassVar[str] = "circle"

    cx: float
    cy: float
    radius: float

    def contains(self, point: Point) -> bool:
        dx = point.x - self.cx
        dy = point.y - self.cy
        return dx * dx + dy * dy <= self.radius * self.radius

    def to_shape(self) -> Ellipse:
        return Ellipse(self.cx, self.cy, self.radius, self.radius)


@dataclass(frozen=True)
class RectangleTemplate:
    """Axis-aligned rectangle template; edges count as inside."""

    name: ClassVar[str] = "rectangle"

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def to_shape(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class TriangleTemplate:
    """Equilateral triangle template with its apex pointing up."""

    name: ClassVar[str] = "triangle"

    cx: float
    cy: float
    radius: float

    @cached_property
    def vertices(self) -> list[Point]:
        return regular_polygon_vertices(Point(self.cx, self.cy), self.radius, 3)

    def contains(self, point: Point) -> bool:
        return point_in_polygon(point, self.vertices)

    def to_shape(self) -> Polygon:
        return Polygon(self.cx, self.cy, self.radius, self.radius, 3)


def create_template(name: str, features: FeatureBundle) -> TemplateShape:
    """Build a template sized from a stroke's bounds and centroid.

    - circle: radius is the mean of half-width and half-height
    - rectangle: exactly the bounding box
    - triangle: radius is half the larger bounding box dimension

    Args:
        name: One of "circle", "rectangle", "triangle"
        features: Features of the stroke

    Returns:
        The template

    Raises:
        ValueError: If the template name is unknown
    """
    b = features.bounds
    c = features.centroid

    if name == "circle":
        return CircleTemplate(c.x, c.y, (b.width + b.height) / 4)
    elif name == "rectangle":
        return RectangleTemplate(b.x, b.y, b.width, b.height)
    elif name == "triangle":
        return TriangleTemplate(c.x, c.y, max(b.width, b.height) / 2)
    else:
        raise ValueError(f"Unknown template: {name}")


@dataclass(frozen=True)
class OverlapResult:
    """Cell counts from rasterizing a stroke against a template.

    Attributes:
        user_cells: Cells inside the user's outline
        template_cells: Cells inside the template
        intersection: Cells inside both
    """

    user_cells: int = 0
    template_cells: int = 0
    intersection: int = 0

    @property
    def union(self) -> int:
        return self.user_cells + self.template_cells - self.intersection

    @property
    def score(self) -> float:
        """Jaccard index in [0, 1]; 0 when nothing was covered."""
        union = self.union
        return self.intersection / union if union > 0 else 0.0


@dataclass(frozen=True)
class CoverageGrid:
    """A stroke rasterized once, ready to be scored against templates.

    Attributes:
        samples: Each cell's sample point paired with whether it lies
            inside the user's outline
        user_cells: Number of cells inside the outline
    """

    samples: tuple[tuple[Point, bool], ...] = ()
    user_cells: int = 0

    def overlap(self, template: TemplateShape) -> OverlapResult:
        """Count template and shared cells on this grid."""
        template_cells = 0
        intersection = 0
        for sample, in_user in self.samples:
            if template.contains(sample):
                template_cells += 1
                if in_user:
                    intersection += 1
        return OverlapResult(self.user_cells, template_cells, intersection)


def _axis_samples(start: float, stop: float, step: float) -> list[float]:
    samples = []
    value = start
    while value < stop:
        samples.append(value)
        value += step
    return samples


def rasterize_stroke(
    user_points: Sequence[Point],
    config: CoverageConfig | None = None,
) -> CoverageGrid:
    """Sample a stroke's outline on the grid shared by every template.

    The sampled region is the stroke's bounding box grown by the configured
    padding. The number of cells per axis is ``grid_size`` or half the
    smaller stroke dimension, whichever is larger, so big strokes are not
    sampled too coarsely. Membership uses the even-odd rule, one scanline
    per grid row.

    Args:
        user_points: Points of the stroke, treated as a closed outline
        config: Grid settings (defaults when omitted)

    Returns:
        The rasterized grid; empty when the region has no area
    """
    config = config or CoverageConfig()
    stroke_bounds = bounding_box(user_points)
    region = stroke_bounds.expanded(config.padding)

    resolution = max(config.grid_size, min(stroke_bounds.width, stroke_bounds.height) / 2)
    step_x = region.width / resolution
    step_y = region.height / resolution
    if step_x <= 0 or step_y <= 0:
        return CoverageGrid()

    xs = _axis_samples(region.x, region.max_x, step_x)
    samples = []
    user_cells = 0
    for y in _axis_samples(region.y, region.max_y, step_y):
        crossings = scanline_crossings(user_points, y)
        for x in xs:
            inside = inside_by_crossings(x, crossings)
            if inside:
                user_cells += 1
            samples.append((Point(x, y), inside))

    return CoverageGrid(tuple(samples), user_cells)


def calculate_overlap(
    user_points: Sequence[Point],
    template: TemplateShape,
    config: CoverageConfig | None = None,
) -> OverlapResult:
    """Rasterize a stroke and a template onto one grid and count cells.

    Scoring several templates against the same stroke should rasterize it
    once with ``rasterize_stroke`` and call ``CoverageGrid.overlap``.

    Args:
        user_points: Points of the stroke, treated as a closed outline
        template: Candidate template
        config: Grid settings (defaults when omitted)

    Returns:
        OverlapResult with the cell counts
    """
    return rasterize_stroke(user_points, config).overlap(template)


def mean_chord_distance(points: Sequence[Point]) -> float:
    """Mean perpendicular distance of points from the first-to-last chord."""
    if not points:
        return math.inf
    start, end = points[0], points[-1]
    return sum(perpendicular_distance(p, start, end) for p in points) / len(points)


@dataclass(frozen=True)
class Candidate:
    """A template with its overlap score."""

    template: TemplateShape
    score: float


class CoverageClassifier:
    """Classifies strokes by template overlap.

    Example:
        classifier = CoverageClassifier(CoverageConfig())
        shape = classifier.classify(simplified, features)
    """

    TEMPLATE_ORDER: ClassVar[tuple[str, ...]] = ("circle", "rectangle", "triangle")

    def __init__(self, config: CoverageConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            config: Overlap thresholds and grid settings (defaults when omitted)
        """
        self.config = config or CoverageConfig()

    def classify(
        self,
        points: Sequence[Point],
        features: FeatureBundle,
    ) -> ShapeDescriptor | None:
        """Classify a stroke by line distance, then template overlap.

        Args:
            points: Simplified points of the stroke
            features: Features of the stroke

        Returns:
            A Line, the best qualifying template shape, or None
        """
        line = self.recognize_line(points)
        if line is not None:
            return line

        if not features.is_closed:
            return None

        best = self.best_candidate(points, features)
        return best.template.to_shape() if best is not None else None

    def recognize_line(self, points: Sequence[Point]) -> Line | None:
        """Return a line when the stroke stays close to its chord."""
        if mean_chord_distance(points) < self.config.line_distance_threshold:
            start, end = points[0], points[-1]
            return Line(start.x, start.y, end.x, end.y)
        return None

    def score_templates(
        self,
        points: Sequence[Point],
        features: FeatureBundle,
    ) -> list[Candidate]:
        """Score every template, in template order, qualifying or not.

        The stroke is rasterized once and every template is scored on the
        same grid.
        """
        grid = rasterize_stroke(points, self.config)
        return [
            Candidate(template=template, score=grid.overlap(template).score)
            for template in (create_template(name, features) for name in self.TEMPLATE_ORDER)
        ]

    def best_candidate(
        self,
        points: Sequence[Point],
        features: FeatureBundle,
    ) -> Candidate | None:
        """Highest scoring template that meets its threshold.

        Ties keep the earlier template (circle, rectangle, triangle).
        """
        best: Candidate | None = None
        for candidate in self.score_templates(points, features):
            if candidate.score < self.threshold_for(candidate.template.name):
                continue
            if best is None or candidate.score > best.score:
                best = candidate
        return best

    def threshold_for(self, name: str) -> float:
        thresholds = {
            "circle": self.config.circle_threshold,
            "rectangle": self.config.rectangle_threshold,
            "triangle": self.config.triangle_threshold,
        }
        return thresholds[name]
