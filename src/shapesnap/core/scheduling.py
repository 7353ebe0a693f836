"""Timer abstractions for the recognition delay.

The sampler only needs ``call_later(delay, callback)`` returning a handle
with ``cancel()``. An asyncio event loop already has that shape, so
interactive hosts can pass their running loop. ManualScheduler is a
deterministic stand-in whose clock only moves when told to, used to replay
recorded strokes and in tests.
"""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle of an armed timer."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle: ...


class ManualTimer:
    """Timer armed on a ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], object]) -> None:
        self.when = when
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """Scheduler driven by an explicit clock.

    Example:
        scheduler = ManualScheduler()
        sampler = StrokeSampler(on_complete=handle, scheduler=scheduler, clock=scheduler.time)
        ...
        scheduler.advance(1.5)  # fires the recognition timer
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._timers: list[ManualTimer] = []

    def time(self) -> float:
        """Current scheduler time in seconds."""
        return self._now

    def call_later(self, delay: float, callback: Callable[[], object]) -> ManualTimer:
        timer = ManualTimer(self._now + max(delay, 0.0), callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of armed timers that have not fired or been cancelled."""
        return sum(1 for t in self._timers if not t.cancelled())

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire every timer that came due.

        Timers fire in due order, each at its own due time. Timers armed by
        a callback are considered in the same pass.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks fired
        """
        target = self._now + seconds
        fired = 0

        while True:
            due = [t for t in self._timers if not t.cancelled() and t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self._timers.remove(timer)
            self._now = timer.when
            timer.callback()
            fired += 1

        self._timers = [t for t in self._timers if not t.cancelled()]
        self._now = target
        return fired
