"""Deterministic replay of recorded strokes through a full session.

Recorded strokes have no timestamps. The replayer feeds them through a
RecognitionSession driven by a ManualScheduler, stepping the clock just
past the capture interval between samples so no sample is throttled, then
advancing past the recognition delay so the timer fires.
"""

from collections.abc import Sequence

from shapesnap.config import RecognizerSettings
from shapesnap.core.emitter import InMemoryShapeStore
from shapesnap.core.recognizer import RecognitionResult
from shapesnap.core.scheduling import ManualScheduler
from shapesnap.core.session import RecognitionSession
from shapesnap.domain import Point, ShapeKind
from shapesnap.utils import RecognitionLogger

# Dataset labels and the shape kind each one should produce
LABEL_KINDS: dict[str, ShapeKind] = {
    "line": ShapeKind.LINE,
    "circle": ShapeKind.ELLIPSE,
    "ellipse": ShapeKind.ELLIPSE,
    "oval": ShapeKind.ELLIPSE,
    "rectangle": ShapeKind.RECTANGLE,
    "rect": ShapeKind.RECTANGLE,
    "square": ShapeKind.RECTANGLE,
    "triangle": ShapeKind.POLYGON,
    "diamond": ShapeKind.POLYGON,
    "polygon": ShapeKind.POLYGON,
    "polyline": ShapeKind.POLYLINE,
    "squiggle": ShapeKind.POLYLINE,
}


def expected_kind(label: str | None) -> ShapeKind | None:
    """Map a dataset label to the shape kind it should produce.

    Args:
        label: Dataset label, case-insensitive

    Returns:
        Expected kind, or None for missing or unknown labels
    """
    if label is None:
        return None
    return LABEL_KINDS.get(label.strip().lower())


class StrokeReplayer:
    """Replays strokes through a session with a synthetic clock.

    Example:
        replayer = StrokeReplayer(settings)
        result = replayer.replay(points)
    """

    def __init__(
        self,
        settings: RecognizerSettings | None = None,
        recognition_logger: RecognitionLogger | None = None,
    ) -> None:
        self.settings = settings or RecognizerSettings()
        self.scheduler = ManualScheduler()
        self.store = InMemoryShapeStore()
        self.session = RecognitionSession(
            store=self.store,
            settings=self.settings,
            scheduler=self.scheduler,
            clock=self.scheduler.time,
            recognition_logger=recognition_logger,
        )
        # 1 ms past the capture interval
        self.sample_step = (self.settings.sampler.capture_interval_ms + 1) / 1000
        self.settle_time = (self.settings.sampler.recognition_delay_ms + 1) / 1000

    def replay(self, points: Sequence[Point]) -> RecognitionResult | None:
        """Feed one stroke through the session and wait for recognition.

        Args:
            points: Samples in drawing order

        Returns:
            The recognition result, or None if the stroke was discarded
        """
        if not points:
            return None

        self.session.last_result = None

        self.session.begin(points[0])
        for sample in points[1:-1]:
            self.scheduler.advance(self.sample_step)
            self.session.add(sample)

        self.scheduler.advance(self.sample_step)
        if not self.session.end(points[-1]):
            return None

        self.scheduler.advance(self.settle_time)
        return self.session.last_result
