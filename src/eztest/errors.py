"""
Exceptions raised by eztest.

Assertion mismatches are not represented here: a failed expectation is
ordinary bookkeeping, reported through the TestContext counters.
"""


class EzTestError(Exception):
    """Base exception for eztest errors."""

    pass


class InvalidStateError(EzTestError):
    """Raised when a Stopwatch is started while running or stopped while paused."""

    pass


class ConfigurationError(EzTestError):
    """Raised when there's a configuration problem."""

    pass
