"""Core recognition algorithms for shapesnap.

This module contains the core algorithms for:

- Geometry operations (distances, angles, point-in-polygon)
- Stroke simplification (Ramer-Douglas-Peucker)
- Feature extraction (closure, circularity, corners)
- Classification (threshold cascade and template coverage)
- Stroke capture (throttled sampling, recognition delay)

The recognition pass itself is synchronous and pure; only the sampler keeps
state between pointer events.

Key functions:
- simplify_points: Reduce a stroke to its significant points
- perpendicular_distance: Distance from a point to a line
- angle_at: Angle at a vertex in degrees
- point_in_polygon: Test if point is inside polygon

Key classes:
- GeometryAnalyzer: Computes the feature bundle of a stroke
- ThresholdClassifier: Rule cascade over features
- CoverageClassifier: Overlap scoring against ideal templates
- ShapeRecognizer: Simplify, analyze, classify, fall back
- StrokeSampler: Buffers a stroke and schedules recognition
- RecognitionSession: Pointer events in, styled shapes out
"""

from shapesnap.core.analyzer import GeometryAnalyzer
from shapesnap.core.classifier import Classifier, build_classifier
from shapesnap.core.coverage import (
    CircleTemplate,
    CoverageClassifier,
    CoverageGrid,
    OverlapResult,
    RectangleTemplate,
    TriangleTemplate,
    calculate_overlap,
    create_template,
    rasterize_stroke,
)
from shapesnap.core.emitter import InMemoryShapeStore, ShapeEmitter, ShapeStore
from shapesnap.core.geometry import (
    angle_at,
    bounding_box,
    centroid,
    distance,
    perpendicular_distance,
    point_in_polygon,
)
from shapesnap.core.recognizer import RecognitionResult, ShapeRecognizer
from shapesnap.core.replay import StrokeReplayer, expected_kind
from shapesnap.core.sampler import SamplerState, StrokeSampler
from shapesnap.core.scheduling import ManualScheduler, Scheduler
from shapesnap.core.session import RecognitionSession
from shapesnap.core.simplify import simplify_points
from shapesnap.core.threshold import ThresholdClassifier

__all__ = [
    # Geometry functions
    "angle_at",
    "bounding_box",
    "centroid",
    "distance",
    "perpendicular_distance",
    "point_in_polygon",
    "simplify_points",
    # Analysis and classification
    "GeometryAnalyzer",
    "Classifier",
    "build_classifier",
    "ThresholdClassifier",
    "CoverageClassifier",
    "CircleTemplate",
    "RectangleTemplate",
    "TriangleTemplate",
    "OverlapResult",
    "CoverageGrid",
    "calculate_overlap",
    "create_template",
    "rasterize_stroke",
    # Recognition pass
    "RecognitionResult",
    "ShapeRecognizer",
    # Capture and delivery
    "SamplerState",
    "StrokeSampler",
    "Scheduler",
    "ManualScheduler",
    "ShapeStore",
    "InMemoryShapeStore",
    "ShapeEmitter",
    "RecognitionSession",
    # Replay
    "StrokeReplayer",
    "expected_kind",
]
