"""
eztest Test Suite.

Tests for the eztest runner including:
- Unit tests for the clock, stopwatch, formatting, configuration and context
- Integration tests for full runs and the CLI driver
"""
