"""
Shared fixtures for the eztest test suite.

Provides:
- A manual clock for deterministic timing
- A string sink standing in for standard output
- A TestContext wired to both
"""

from __future__ import annotations

import io
from typing import Generator

import pytest
import structlog

from eztest.clock import ManualClock
from eztest.context import TestContext


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def context(sink: io.StringIO, clock: ManualClock) -> TestContext:
    """A context with the default reporting cap of five failures."""
    return TestContext(sink, clock=clock)
