"""
Demonstration tests.

Three tests exercising the runner: one that passes, one that fails and one
that takes a noticeable amount of time.
"""

from __future__ import annotations

from eztest.context import TestContext, TestFunction


def pass_test(cx: TestContext) -> None:
    cx.expect_equal(1, 1)


def fail_test(cx: TestContext) -> None:
    cx.expect_equal(0, 1)


def make_slow_test(iterations: int) -> TestFunction:
    """Build a test that sums ``i - j`` over an iterations x iterations grid."""

    def slow_test(cx: TestContext) -> None:
        total = 0
        for i in range(iterations):
            for j in range(iterations):
                total += i - j
        cx.expect_equal(total, 0)

    return slow_test


def run_demo(cx: TestContext, slow_iterations: int = 2000) -> None:
    """Run the demonstration tests on cx and print the summary."""
    cx.run_test("This test should pass", pass_test)
    cx.run_test("This test should fail", fail_test)
    cx.run_test("This test should take a while", make_slow_test(slow_iterations))
    cx.print_results()
