"""Feature bundle computed once per recognition pass."""

from dataclasses import dataclass
from typing import Any

from shapesnap.domain.geometry import Bounds, Corner, Point


@dataclass(frozen=True)
class FeatureBundle:
    """Scalar and structural features of a stroke.

    Produced by GeometryAnalyzer and shared by both classifiers.

    Attributes:
        bounds: Bounding box of the analyzed points
        centroid: Arithmetic mean of the analyzed points
        is_closed: True when the endpoints nearly meet
        aspect_ratio: Width over height, both floored at 1
        circularity: 1.0 for a perfect circle, lower for everything else
        corners: Corners found on the analyzed (simplified) points
        corners_raw: Corners found on the raw samples, if they were supplied
    """

    bounds: Bounds
    centroid: Point
    is_closed: bool
    aspect_ratio: float
    circularity: float
    corners: tuple[Corner, ...] = ()
    corners_raw: tuple[Corner, ...] | None = None

    @property
    def width(self) -> float:
        """Bounding box width floored at 1."""
        return max(self.bounds.width, 1.0)

    @property
    def height(self) -> float:
        """Bounding box height floored at 1."""
        return max(self.bounds.height, 1.0)

    @property
    def effective_corners(self) -> tuple[Corner, ...]:
        """Raw-point corners when available, otherwise simplified ones.

        Simplification drops the very points that mark a sharp turn, so the
        raw reading is the more trustworthy one.
        """
        if self.corners_raw is not None:
            return self.corners_raw
        return self.corners

    @property
    def corner_count(self) -> int:
        return len(self.effective_corners)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bounds": self.bounds.to_dict(),
            "centroid": self.centroid.to_dict(),
            "is_closed": self.is_closed,
            "aspect_ratio": self.aspect_ratio,
            "circularity": self.circularity,
            "corners": [c.to_dict() for c in self.corners],
            "corners_raw": (
                [c.to_dict() for c in self.corners_raw]
                if self.corners_raw is not None
                else None
            ),
        }
