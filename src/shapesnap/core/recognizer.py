"""Recognition pass: simplify, analyze, classify, fall back.

This module runs one synchronous, pure recognition pass over a finished
stroke. It never raises for geometric reasons; a stroke that no
classifier claims becomes a polyline of its simplified points.
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass

from shapesnap.config import RecognitionAlgorithm, RecognizerSettings
from shapesnap.core.analyzer import GeometryAnalyzer
from shapesnap.core.classifier import Classifier, build_classifier
from shapesnap.core.simplify import simplify_points
from shapesnap.domain import FeatureBundle, Point, Polyline, ShapeDescriptor
from shapesnap.utils import RecognitionLogger


@dataclass(frozen=True)
class RecognitionResult:
    """Outcome of a recognition pass with the data that led to it.

    Attributes:
        shape: The recognized shape or the polyline fallback
        algorithm: Classifier strategy that ran
        raw_count: Number of raw samples
        simplified: Points after simplification
        features: Feature bundle the classifier saw
        fallback: True if no classifier rule matched
        duration_ms: Wall time of the pass
    """

    shape: ShapeDescriptor
    algorithm: RecognitionAlgorithm
    raw_count: int
    simplified: tuple[Point, ...]
    features: FeatureBundle
    fallback: bool
    duration_ms: float


class ShapeRecognizer:
    """Runs the recognition pipeline for finished strokes.

    Example:
        recognizer = ShapeRecognizer(RecognizerSettings(algorithm="coverage"))
        shape = recognizer.recognize(points)
    """

    def __init__(
        self,
        settings: RecognizerSettings | None = None,
        classifier: Classifier | None = None,
        logger: RecognitionLogger | None = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            settings: Recognizer settings (defaults when omitted)
            classifier: Classifier override; built from
                ``settings.algorithm`` when omitted
            logger: Recognition logger (a default one when omitted)
        """
        self.settings = settings or RecognizerSettings()
        self.analyzer = GeometryAnalyzer(self.settings.geometry)
        self.classifier = classifier or build_classifier(self.settings)
        self.logger = logger or RecognitionLogger()

    def analyze(self, raw_points: Sequence[Point]) -> tuple[list[Point], FeatureBundle]:
        """Simplify a stroke and compute its features.

        Features come from the simplified points; corners are additionally
        detected on the raw samples.

        Args:
            raw_points: Samples of the stroke

        Returns:
            Tuple of (simplified points, features)
        """
        simplified = simplify_points(raw_points, self.settings.geometry.simplification_tolerance)
        features = self.analyzer.analyze(simplified, raw_points=raw_points)
        return simplified, features

    def recognize_detailed(self, raw_points: Sequence[Point]) -> RecognitionResult | None:
        """Recognize a stroke and report how.

        Args:
            raw_points: Samples of the stroke

        Returns:
            RecognitionResult, or None when fewer than two points remain
            after simplification (nothing to draw)
        """
        start_time = time.perf_counter()

        simplified, features = self.analyze(raw_points)
        if len(simplified) < 2:
            return None

        self.logger.log_features(features, len(raw_points), len(simplified))

        shape = self.classifier.classify(simplified, features)
        fallback = shape is None
        if shape is None:
            shape = Polyline(simplified)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.log_recognized(
            shape.kind,
            self.settings.algorithm.value,
            fallback,
            duration_ms,
        )

        return RecognitionResult(
            shape=shape,
            algorithm=self.settings.algorithm,
            raw_count=len(raw_points),
            simplified=tuple(simplified),
            features=features,
            fallback=fallback,
            duration_ms=duration_ms,
        )

    def recognize(self, raw_points: Sequence[Point]) -> ShapeDescriptor | None:
        """Recognize a stroke.

        Args:
            raw_points: Samples of the stroke

        Returns:
            The recognized shape, a Polyline fallback, or None for strokes
            with fewer than two points
        """
        result = self.recognize_detailed(raw_points)
        return result.shape if result is not None else None
