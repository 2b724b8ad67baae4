"""Text and number helpers shared across contexts."""

import math
from typing import List


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounding up.

    Python's built-in round() uses banker's rounding (round(68.5) == 68).
    Scores are rounded the conventional way instead.

    Example:
        >>> round_half_up(68.5)
        69
        >>> round_half_up(12.4)
        12
    """
    return math.floor(value + 0.5)


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty strings."""
    return text.split()


def word_count(text: str) -> int:
    """
    Count whitespace-separated words.

    Example:
        >>> word_count("  Senior  Python developer\\n")
        3
    """
    return len(split_words(text))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        "short"
        >>> truncate_display("this is a very long string", 10)
        "this is..."
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
