"""Classifier interface and strategy selection.

Two strategies classify a stroke from the same inputs:
- ThresholdClassifier: an ordered cascade of feature rules
- CoverageClassifier: template rasterization scored by Jaccard overlap

Exactly one is active per recognition pass and it is picked from
configuration, never from the stroke itself.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from shapesnap.config import RecognitionAlgorithm, RecognizerSettings
from shapesnap.domain import FeatureBundle, Point, ShapeDescriptor


@runtime_checkable
class Classifier(Protocol):
    """Turns simplified points plus features into a shape, or nothing."""

    def classify(
        self,
        points: Sequence[Point],
        features: FeatureBundle,
    ) -> ShapeDescriptor | None:
        """Classify a stroke.

        Args:
            points: Simplified points of the stroke (at least 2)
            features: Features computed from those points

        Returns:
            The recognized shape, or None when nothing matched
        """
        ...


def build_classifier(settings: RecognizerSettings) -> Classifier:
    """Create the classifier selected by ``settings.algorithm``.

    Args:
        settings: Recognizer settings

    Returns:
        A configured classifier instance
    """
    from shapesnap.core.coverage import CoverageClassifier
    from shapesnap.core.threshold import ThresholdClassifier

    if settings.algorithm is RecognitionAlgorithm.COVERAGE:
        return CoverageClassifier(config=settings.coverage)
    return ThresholdClassifier(config=settings.threshold)
