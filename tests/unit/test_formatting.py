"""
Unit tests for output formatting.

Tests cover:
- Diagnostic value rendering in both sequence styles
- FAILED line layout
- Summary block layout
"""

from __future__ import annotations

from eztest.formatting import RULE, format_failure, format_summary, format_value


class TestFormatValue:
    """Tests for format_value."""

    def test_scalars_use_str(self):
        assert format_value(3) == "3"
        assert format_value("abc") == "abc"
        assert format_value(None) == "None"

    def test_python_style_sequences(self):
        assert format_value([1, 2, 3]) == "[1, 2, 3]"
        assert format_value((1, 2)) == "(1, 2)"

    def test_brace_style_sequences(self):
        assert format_value([1, 2, 3], "braces") == "{1,2,3}"
        assert format_value((), "braces") == "{}"

    def test_brace_style_nests(self):
        assert format_value([[1, 2], ["a"]], "braces") == "{{1,2},{a}}"

    def test_brace_style_leaves_scalars_alone(self):
        assert format_value(7, "braces") == "7"
        assert format_value("xy", "braces") == "xy"


class TestFormatFailure:
    def test_layout(self):
        assert format_failure(4, "1", "0") == "  FAILED [4]: expected 1, got 0\n"


class TestFormatSummary:
    """Tests for format_summary."""

    def test_layout(self):
        assert format_summary(1, 2) == (
            "===================================\n"
            "ASSERTIONS FAILED:          1\n"
            "ASSERTIONS MADE:            2\n"
            "===================================\n"
        )

    def test_rule_width(self):
        assert RULE == "=" * 35

    def test_counts_are_right_justified(self):
        lines = format_summary(12345, 1234567).splitlines()
        assert lines[1] == "ASSERTIONS FAILED:      12345"
        assert lines[2] == "ASSERTIONS MADE:      1234567"

    def test_wide_counts_are_not_truncated(self):
        lines = format_summary(0, 123456789).splitlines()
        assert lines[2].endswith("123456789")
