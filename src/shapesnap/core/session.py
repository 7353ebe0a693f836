"""Wiring of sampler, recognizer and emitter into one drawing session."""

import time
from collections.abc import Callable

import structlog

from shapesnap.config import RecognizerSettings
from shapesnap.core.emitter import ShapeEmitter, ShapeStore
from shapesnap.core.recognizer import RecognitionResult, ShapeRecognizer
from shapesnap.core.sampler import SamplerState, StrokeSampler
from shapesnap.core.scheduling import Scheduler
from shapesnap.domain import Point, StyledShape
from shapesnap.utils import RecognitionLogger, RecognitionStats

logger = structlog.get_logger(__name__)


class RecognitionSession:
    """Turns pointer events into styled shapes in a store.

    One session serves one drawing surface. Pointer events go in through
    ``begin``/``add``/``end``/``cancel``; once the recognition delay elapses
    the stroke is recognized and the result is added to the store.

    Example:
        session = RecognitionSession(store=store, scheduler=loop)
        session.begin(Point(0, 0))
        session.add(Point(25, 25))
        session.end(Point(100, 100))
    """

    def __init__(
        self,
        store: ShapeStore,
        settings: RecognizerSettings | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] = time.monotonic,
        recognition_logger: RecognitionLogger | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            store: Destination for recognized shapes
            settings: Recognizer settings (defaults when omitted)
            scheduler: Timer source for the recognition delay; the running
                asyncio loop when omitted
            clock: Monotonic clock in seconds used for throttling
            recognition_logger: Shared recognition logger
        """
        self.settings = settings or RecognizerSettings()
        self.recognition_logger = recognition_logger or RecognitionLogger()
        self.recognizer = ShapeRecognizer(self.settings, logger=self.recognition_logger)
        self.emitter = ShapeEmitter(store, self.settings.style)
        self.sampler = StrokeSampler(
            on_complete=self._complete,
            config=self.settings.sampler,
            scheduler=scheduler,
            clock=clock,
        )
        self.last_result: RecognitionResult | None = None
        self.last_emitted: StyledShape | None = None

    @property
    def state(self) -> SamplerState:
        return self.sampler.state

    @property
    def points(self) -> tuple[Point, ...]:
        """Live stroke preview."""
        return self.sampler.points

    @property
    def stats(self) -> RecognitionStats:
        return self.recognition_logger.stats

    def begin(self, sample: Point) -> None:
        self.sampler.begin(sample)

    def add(self, sample: Point) -> bool:
        return self.sampler.add(sample)

    def end(self, sample: Point) -> bool:
        """Finish the stroke.

        Returns:
            True if recognition is pending
        """
        drawing = self.sampler.state is SamplerState.DRAWING
        count = len(self.sampler.points) + 1
        pending = self.sampler.end(sample)
        if drawing and not pending:
            self.recognition_logger.log_stroke_discarded(count, self.settings.sampler.min_points)
        return pending

    def cancel(self) -> bool:
        """Drop the current stroke, pending or in progress.

        Returns:
            True if there was a stroke to drop
        """
        count = len(self.sampler.points)
        cancelled = self.sampler.cancel()
        if cancelled:
            self.recognition_logger.log_stroke_cancelled(count)
        return cancelled

    def _complete(self, points: list[Point]) -> None:
        result = self.recognizer.recognize_detailed(points)
        self.last_result = result
        if result is None:
            logger.debug("Nothing to emit", points=len(points))
            return
        self.last_emitted = self.emitter.emit(result.shape)
