"""Stroke capture and the pending-recognition timer.

The sampler owns the single live stroke buffer. It throttles incoming
samples, discards strokes that are too short to recognize, and arms a
cancellable timer between the end of a stroke and its recognition so the
host can show a brief "pending" state.

State machine:

    IDLE --begin--> DRAWING --end (enough points)--> PENDING --timer--> IDLE
                       |                                |
                       +--end (too few) / cancel--> IDLE <--cancel--+
"""

import asyncio
import time
from collections.abc import Callable
from enum import Enum, auto

from shapesnap.config import SamplerConfig
from shapesnap.core.scheduling import Scheduler, TimerHandle
from shapesnap.domain import Point


class SamplerState(Enum):
    """Lifecycle state of the stroke buffer."""

    IDLE = auto()
    DRAWING = auto()
    PENDING = auto()


class StrokeSampler:
    """Buffers one stroke and schedules its recognition.

    Example:
        sampler = StrokeSampler(on_complete=recognize, scheduler=loop)
        sampler.begin(Point(10, 10))
        sampler.add(Point(12, 14))
        sampler.end(Point(40, 40))   # recognition runs after the delay
    """

    def __init__(
        self,
        on_complete: Callable[[list[Point]], None],
        config: SamplerConfig | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the sampler.

        Args:
            on_complete: Called once with the buffered points when the
                recognition timer fires
            config: Capture interval, delay and minimum points
            scheduler: Timer source; the running asyncio loop when omitted
            clock: Monotonic clock in seconds used for throttling
        """
        self.config = config or SamplerConfig()
        self._on_complete = on_complete
        self._scheduler = scheduler
        self._clock = clock

        self._buffer: list[Point] = []
        self._state = SamplerState.IDLE
        self._timer: TimerHandle | None = None
        self._last_capture = 0.0

    @property
    def state(self) -> SamplerState:
        return self._state

    @property
    def points(self) -> tuple[Point, ...]:
        """Snapshot of the current buffer, for preview rendering."""
        return tuple(self._buffer)

    @property
    def is_pending(self) -> bool:
        """True while a finished stroke waits for recognition."""
        return self._state is SamplerState.PENDING

    def begin(self, sample: Point) -> None:
        """Start a new stroke, dropping any previous one.

        Args:
            sample: First sample of the stroke
        """
        self._disarm()
        self._buffer = [sample]
        self._state = SamplerState.DRAWING
        self._last_capture = self._clock()

    def add(self, sample: Point) -> bool:
        """Append a sample unless it arrives within the capture interval.

        Args:
            sample: Pointer position

        Returns:
            True if the sample was accepted. Throttled samples and samples
            outside a stroke are ignored without error.
        """
        if self._state is not SamplerState.DRAWING:
            return False

        now = self._clock()
        if (now - self._last_capture) * 1000 < self.config.capture_interval_ms:
            return False

        self._last_capture = now
        self._buffer.append(sample)
        return True

    def end(self, sample: Point) -> bool:
        """Finish the stroke and arm the recognition timer.

        Args:
            sample: Final sample, always appended

        Returns:
            True if recognition is pending; False if the stroke was
            discarded for having fewer than ``min_points`` samples or no
            stroke was in progress

        Raises:
            RuntimeError: If no scheduler was given and no asyncio loop is
                running. The stroke is dropped and the sampler is idle.
        """
        if self._state is not SamplerState.DRAWING:
            return False

        self._buffer.append(sample)

        if len(self._buffer) < self.config.min_points:
            self._reset()
            return False

        scheduler = self._resolve_scheduler()
        self._state = SamplerState.PENDING
        self._timer = scheduler.call_later(
            self.config.recognition_delay_ms / 1000,
            self._fire,
        )
        return True

    def cancel(self) -> bool:
        """Discard the stroke and disarm the timer. Safe to call any time.

        Returns:
            True if there was a stroke to discard
        """
        had_stroke = self._state is not SamplerState.IDLE
        self._disarm()
        self._reset()
        return had_stroke

    def _resolve_scheduler(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            # No timer can be armed; leave the sampler idle for the next stroke.
            self._reset()
            raise

    def _fire(self) -> None:
        if self._state is not SamplerState.PENDING:
            return

        points = list(self._buffer)
        self._timer = None
        self._reset()
        self._on_complete(points)

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _reset(self) -> None:
        self._buffer = []
        self._state = SamplerState.IDLE
