"""
eztest - a small embedded test runner

Runs named test functions, counts equality expectations, times each test
with a pausable stopwatch and prints a plain-text summary.
"""

__version__ = "0.1.0"

from eztest.clock import Clock, ManualClock, SystemClock
from eztest.config import Config, load_config
from eztest.context import ContextState, TestContext, TestFunction, TestOutcome
from eztest.errors import ConfigurationError, EzTestError, InvalidStateError
from eztest.stopwatch import Interval, Stopwatch

__all__ = [
    "__version__",
    "Clock",
    "ManualClock",
    "SystemClock",
    "Config",
    "load_config",
    "ContextState",
    "TestContext",
    "TestFunction",
    "TestOutcome",
    "EzTestError",
    "InvalidStateError",
    "ConfigurationError",
    "Interval",
    "Stopwatch",
]
