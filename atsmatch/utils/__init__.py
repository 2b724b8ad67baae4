"""
Shared utilities for ATSMATCH.

Common functionality used across contexts:
- Logger configuration
- Report table formatting
- Text helpers
"""

from atsmatch.utils.text_processing import round_half_up, truncate_display, word_count
from atsmatch.utils.timestamp import now

__all__ = ["now", "round_half_up", "truncate_display", "word_count"]
