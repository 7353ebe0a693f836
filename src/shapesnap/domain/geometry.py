"""Core geometric types for stroke representation.

This module defines the fundamental geometric types used throughout shapesnap:
- Point: A single pointer sample in canvas coordinates
- Bounds: An axis-aligned bounding box
- Corner: A sharp change of direction inside a point sequence
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D canvas space.

    Pointer samples are points; their order in a stroke is the order in
    which they were captured. Immutable and hashable.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        x: Minimum x coordinate
        y: Minimum y coordinate
        width: Extent along x (never negative)
        height: Extent along y (never negative)
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def expanded(self, padding: float) -> "Bounds":
        """Return a copy grown by ``padding`` on every side."""
        return Bounds(
            x=self.x - padding,
            y=self.y - padding,
            width=self.width + 2 * padding,
            height=self.height + 2 * padding,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class Corner:
    """A point where the local direction of a sequence changes sharply.

    Attributes:
        index: Position of the corner in the analyzed sequence
        point: The point at that position
        angle: Interior angle at the point, in degrees (180 = straight)
    """

    index: int
    point: Point
    angle: float

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "point": self.point.to_dict(), "angle": self.angle}
