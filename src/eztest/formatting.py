"""Text rendering for diagnostics and the results summary."""

from __future__ import annotations

from typing import Any, Literal

SequenceStyle = Literal["python", "braces"]

RULE = "=" * 35
COUNT_WIDTH = 7


def format_value(value: Any, sequence_style: SequenceStyle = "python") -> str:
    """
    Render a value for a FAILED diagnostic line.

    Lists and tuples are rendered like ``{1,2,3}`` in "braces" style, and with
    plain ``str()`` otherwise.

    Example:
        >>> format_value([1, [2, 3]], "braces")
        '{1,{2,3}}'
    """
    if sequence_style == "braces" and isinstance(value, (list, tuple)):
        inner = ",".join(format_value(item, sequence_style) for item in value)
        return "{" + inner + "}"
    return str(value)


def format_failure(assertion_num: int, expected: str, actual: str) -> str:
    return f"  FAILED [{assertion_num}]: expected {expected}, got {actual}\n"


def format_summary(failed: int, made: int) -> str:
    """Return the fixed-format summary block printed at the end of a run."""
    return (
        f"{RULE}\n"
        f"ASSERTIONS FAILED:    {failed:>{COUNT_WIDTH}}\n"
        f"ASSERTIONS MADE:      {made:>{COUNT_WIDTH}}\n"
        f"{RULE}\n"
    )
