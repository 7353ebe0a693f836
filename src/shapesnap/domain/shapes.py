"""Shape descriptors produced by recognition.

A recognized stroke becomes exactly one of five closed variants. They are
plain frozen dataclasses joined in the ``ShapeDescriptor`` union rather
than a class hierarchy, since no other outcome exists.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from shapesnap.domain.geometry import Point
from shapesnap.exceptions import ShapeDataError


class ShapeKind(str, Enum):
    """Tag of a shape descriptor."""

    LINE = "line"
    ELLIPSE = "ellipse"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    POLYLINE = "polyline"


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment between two points."""

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    x1: float
    y1: float
    x2: float
    y2: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}


@dataclass(frozen=True, slots=True)
class Ellipse:
    """Axis-aligned ellipse; a circle when rx equals ry."""

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    cx: float
    cy: float
    rx: float
    ry: float

    @property
    def is_circle(self) -> bool:
        return self.rx == self.ry

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "cx": self.cx, "cy": self.cy, "rx": self.rx, "ry": self.ry}


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class Polygon:
    """Regular polygon or star around a centre.

    Triangles, diamonds and N-gons are all polygons. When inner_radius
    equals outer_radius the outline is a plain regular polygon.

    Attributes:
        cx: Centre x
        cy: Centre y
        inner_radius: Radius of the inner vertices
        outer_radius: Radius of the outer vertices
        sides: Number of outer vertices
        rotation: Rotation in degrees, clockwise in canvas space
    """

    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON

    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    sides: int
    rotation: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "cx": self.cx,
            "cy": self.cy,
            "inner_radius": self.inner_radius,
            "outer_radius": self.outer_radius,
            "sides": self.sides,
            "rotation": self.rotation,
        }


@dataclass(frozen=True, slots=True)
class Polyline:
    """Freeform path through the given points. The universal fallback."""

    kind: ClassVar[ShapeKind] = ShapeKind.POLYLINE

    points: tuple[Point, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable of points but store an immutable copy
        object.__setattr__(self, "points", tuple(self.points))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "points": [p.to_dict() for p in self.points]}


ShapeDescriptor = Line | Ellipse | Rectangle | Polygon | Polyline


@dataclass(frozen=True)
class StyledShape:
    """A shape plus the default styling applied when it was emitted.

    Attributes:
        shape: The recognized shape descriptor
        stroke: Stroke colour
        fill: Fill colour
        stroke_width: Stroke width in canvas units
    """

    shape: ShapeDescriptor
    stroke: str
    fill: str
    stroke_width: float

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.to_dict(),
            "stroke": self.stroke,
            "fill": self.fill,
            "stroke_width": self.stroke_width,
        }


_SHAPE_TYPES: dict[ShapeKind, type] = {
    ShapeKind.LINE: Line,
    ShapeKind.ELLIPSE: Ellipse,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.POLYGON: Polygon,
    ShapeKind.POLYLINE: Polyline,
}


def shape_from_dict(data: dict[str, Any]) -> ShapeDescriptor:
    """Deserialize a shape descriptor.

    Args:
        data: Dictionary produced by a descriptor's ``to_dict``

    Returns:
        The matching descriptor

    Raises:
        ShapeDataError: If the type tag is unknown or fields are missing
    """
    if not isinstance(data, dict):
        raise ShapeDataError(f"expected a shape object, got {type(data).__name__}")

    try:
        kind = ShapeKind(data["type"])
    except (KeyError, TypeError, ValueError) as e:
        raise ShapeDataError(f"unknown shape type {data.get('type')!r}") from e

    fields = {k: v for k, v in data.items() if k != "type"}
    try:
        if kind is ShapeKind.POLYLINE:
            fields["points"] = [Point.from_dict(p) for p in fields.get("points", [])]
        return _SHAPE_TYPES[kind](**fields)
    except (KeyError, TypeError) as e:
        raise ShapeDataError(f"invalid {kind.value} data: {e}") from e
