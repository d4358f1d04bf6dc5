"""
Stopwatch with pause/resume support.

A stopwatch keeps one Interval per running period. Elapsed time is the sum
of all intervals since the last reset, with the current interval counted up
to "now" while it is still running.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import structlog

from eztest.clock import NS_PER_MS, Clock, SystemClock
from eztest.errors import InvalidStateError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Interval:
    """One contiguous running period of a stopwatch."""

    start_ns: int
    stop_ns: int = 0
    running: bool = True

    def duration_ns(self, now_ns: int) -> int:
        """Length of the interval, measured up to now_ns if still running."""
        if self.running:
            return now_ns - self.start_ns
        return self.stop_ns - self.start_ns


class Stopwatch:
    """
    A crude stopwatch.

    The stopwatch is paused and reset upon construction. elapsed() can be
    called at any time to check the accumulated duration.

    Example:
        >>> from eztest.clock import ManualClock
        >>> clock = ManualClock()
        >>> watch = Stopwatch(clock)
        >>> watch.start()
        >>> clock.advance(ms=12)
        >>> watch.stop()
        >>> watch.elapsed()
        12
    """

    def __init__(self, clock: Clock | None = None) -> None:
        """
        Initialize the stopwatch.

        Args:
            clock: Time source. Uses the system performance counter if not provided.
        """
        self._clock = clock or SystemClock()
        self._intervals: list[Interval] = []

    @property
    def running(self) -> bool:
        """True while the last interval has not been stopped."""
        return bool(self._intervals) and self._intervals[-1].running

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals recorded since the last reset, oldest first."""
        return tuple(self._intervals)

    def start(self) -> None:
        """
        Start (unpause) the stopwatch.

        Raises:
            InvalidStateError: If the stopwatch is already running.
        """
        if self.running:
            raise InvalidStateError("Stopwatch: start() called while already running")
        self._intervals.append(Interval(start_ns=self._clock.now_ns()))

    def stop(self) -> None:
        """
        Stop (pause) the stopwatch.

        Afterwards the stopwatch can be resumed with start() or cleared with
        reset().

        Raises:
            InvalidStateError: If the stopwatch is not running.
        """
        if not self.running:
            raise InvalidStateError("Stopwatch: stop() called while not running")
        self._intervals[-1] = replace(
            self._intervals[-1], stop_ns=self._clock.now_ns(), running=False
        )

    def reset(self) -> None:
        """Discard all intervals. Valid in any state."""
        if self._intervals:
            logger.debug("stopwatch reset", intervals=len(self._intervals))
        self._intervals.clear()

    def elapsed(self) -> int:
        """Return the accumulated running time in whole milliseconds."""
        now = self._clock.now_ns()
        total = sum(interval.duration_ns(now) for interval in self._intervals)
        return total // NS_PER_MS
