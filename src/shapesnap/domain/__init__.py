"""Domain models for shapesnap.

This module contains the models representing stroke samples, extracted
features and recognized shapes. All models are designed to be:

- Immutable (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any rendering toolkit

Key classes:
- Point: A 2D pointer sample
- Bounds: Axis-aligned bounding box
- Corner: A detected direction change
- FeatureBundle: Features shared by the classifiers
- Line, Ellipse, Rectangle, Polygon, Polyline: Shape descriptors
- StyledShape: A descriptor with default styling applied
"""

from shapesnap.domain.features import FeatureBundle
from shapesnap.domain.geometry import Bounds, Corner, Point
from shapesnap.domain.shapes import (
    Ellipse,
    Line,
    Polygon,
    Polyline,
    Rectangle,
    ShapeDescriptor,
    ShapeKind,
    StyledShape,
    shape_from_dict,
)

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Core types
    "Point",
    "Bounds",
    "Corner",
    "FeatureBundle",
    # Shapes
    "Line",
    "Ellipse",
    "Rectangle",
    "Polygon",
    "Polyline",
    "ShapeDescriptor",
    "StyledShape",
    "shape_from_dict",
]
