"""
Clock sources for the stopwatch.

Timestamps are integer nanoseconds from an arbitrary monotonic origin, so
that sums of many short intervals stay exact.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

NS_PER_MS = 1_000_000
NS_PER_SECOND = 1_000_000_000


class Clock(ABC):
    """Abstract base class for monotonic time sources."""

    @abstractmethod
    def now_ns(self) -> int:
        """Return the current time in nanoseconds."""
        pass


class SystemClock(Clock):
    """Wall-clock time source backed by the high resolution performance counter."""

    def now_ns(self) -> int:
        return time.perf_counter_ns()


class ManualClock(Clock):
    """
    A clock that only moves when told to.

    Used to make elapsed-time accounting deterministic:

        >>> clock = ManualClock()
        >>> clock.advance(ms=250)
        >>> clock.now_ns()
        250000000
    """

    def __init__(self, start_ns: int = 0) -> None:
        if start_ns < 0:
            raise ValueError("start_ns must be non-negative")
        self._now = start_ns

    def now_ns(self) -> int:
        return self._now

    def advance(self, ms: int = 0, seconds: float = 0, ns: int = 0) -> None:
        """
        Move the clock forward.

        Args:
            ms: Milliseconds to add.
            seconds: Seconds to add.
            ns: Nanoseconds to add.

        Raises:
            ValueError: If the total step is negative.
        """
        step = ns + ms * NS_PER_MS + int(seconds * NS_PER_SECOND)
        if step < 0:
            raise ValueError("a clock cannot move backwards")
        self._now += step

    def set(self, ns: int) -> None:
        """Jump to an absolute timestamp, which may not be in the past."""
        if ns < self._now:
            raise ValueError("a clock cannot move backwards")
        self._now = ns
