"""
Test execution and assertion bookkeeping.

A TestContext runs named test functions one at a time, times each of them
with its Stopwatch, counts the outcome of every expectation and renders
progress and results to a text sink.

Example:
    cx = TestContext()
    cx.run_test("This test should pass", lambda cx: cx.expect_equal(1, 1))
    cx.run_test("This test should fail", lambda cx: cx.expect_equal(0, 1))
    cx.print_results()
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

import structlog

from eztest.clock import Clock
from eztest.config import OutputConfig
from eztest.formatting import format_failure, format_summary, format_value
from eztest.stopwatch import Stopwatch

logger = structlog.get_logger(__name__)

TestFunction = Callable[["TestContext"], None]


@dataclass
class ContextState:
    """Counters owned by a TestContext."""

    # incremented by every expect_equal() call, never reset
    assertion_num: int = 1
    success_count: int = 0
    failure_count: int = 0
    # failed expectations in the test currently running
    current_failures: int = 0

    @property
    def assertions_made(self) -> int:
        return self.success_count + self.failure_count


@dataclass(frozen=True)
class TestOutcome:
    """Result of a single run_test() call."""

    __test__ = False

    name: str
    passed: bool
    failures: int
    elapsed_ms: int


class TestContext:
    """
    Create a TestContext to count the expectations that succeed and fail.

    Test functions receive the context and call expect_equal() on it any
    number of times. Only the first ``max_reported_failures`` failures of a
    test are printed; later ones are counted and summarized.
    """

    __test__ = False

    def __init__(
        self,
        out: TextIO | None = None,
        *,
        output: OutputConfig | None = None,
        clock: Clock | None = None,
        max_reported_failures: int | None = None,
    ) -> None:
        """
        Initialize the context.

        Args:
            out: Text sink for progress and results. Defaults to sys.stdout.
            output: Reporting settings. Defaults to OutputConfig().
            clock: Time source for the stopwatch.
            max_reported_failures: Overrides the configured reporting cap.
        """
        if output is None:
            output = OutputConfig()

        self.out = out if out is not None else sys.stdout
        self.state = ContextState()
        self.watch = Stopwatch(clock)
        self.sequence_style = output.sequence_style
        self.max_reported_failures = (
            output.max_reported_failures
            if max_reported_failures is None
            else max_reported_failures
        )
        if self.max_reported_failures < 0:
            raise ValueError("max_reported_failures must be non-negative")
        self._outcomes: list[TestOutcome] = []
        # True while "<name>..." has been written without a line break
        self._line_open = False

    @property
    def success_count(self) -> int:
        return self.state.success_count

    @property
    def failure_count(self) -> int:
        return self.state.failure_count

    @property
    def assertions_made(self) -> int:
        return self.state.assertions_made

    @property
    def outcomes(self) -> tuple[TestOutcome, ...]:
        """Outcomes of every test run so far, in run order."""
        return tuple(self._outcomes)

    @property
    def all_passed(self) -> bool:
        return self.state.failure_count == 0

    def expect_equal(self, actual: Any, expected: Any) -> bool:
        """
        Record an equality expectation.

        The stopwatch is paused while the expectation is checked and
        reported, so bookkeeping does not count towards the test duration.

        Args:
            actual: The observed value.
            expected: The reference value.

        Returns:
            Whether ``expected == actual``.

        Errors raised while comparing or rendering the values propagate after
        the stopwatch has been resumed.
        """
        self.watch.stop()
        state = self.state
        try:
            result = bool(expected == actual)
            if result:
                state.success_count += 1
            else:
                state.failure_count += 1
                state.current_failures += 1
                if state.current_failures <= self.max_reported_failures:
                    self._end_progress_line()
                    self.out.write(
                        format_failure(
                            state.assertion_num,
                            format_value(expected, self.sequence_style),
                            format_value(actual, self.sequence_style),
                        )
                    )
        finally:
            state.assertion_num += 1
            self.watch.start()
        return result

    def run_test(self, name: str, func: TestFunction) -> TestOutcome:
        """
        Run func and print its result, including the time elapsed.

        Exceptions raised by func are not caught.
        """
        state = self.state
        state.current_failures = 0

        self.out.write(f"{name}...")
        self.out.flush()
        self._line_open = True
        logger.debug("test started", test=name)

        self.watch.start()
        func(self)
        self.watch.stop()
        elapsed_ms = self.watch.elapsed()

        failures = state.current_failures
        omitted = failures - self.max_reported_failures
        if omitted > 0:
            self._end_progress_line()
            self.out.write(f"[{omitted} other failures omitted]\n")

        if failures == 0:
            self.out.write(f" PASS ({elapsed_ms} ms)\n")
        else:
            self._end_progress_line()
            self.out.write(f"{name}... FAIL ({elapsed_ms} ms)\n")
        self._line_open = False

        outcome = TestOutcome(
            name=name, passed=failures == 0, failures=failures, elapsed_ms=elapsed_ms
        )
        self._outcomes.append(outcome)
        logger.debug(
            "test finished",
            test=name,
            passed=outcome.passed,
            failures=failures,
            elapsed_ms=elapsed_ms,
        )

        self.watch.reset()
        return outcome

    def print_results(self) -> None:
        """Print the number of expectations made and the number that failed."""
        self.out.write(format_summary(self.state.failure_count, self.state.assertions_made))
        self.out.flush()

    def _end_progress_line(self) -> None:
        if self._line_open:
            self.out.write("\n")
            self._line_open = False
