"""
Intake Context

Responsibilities:
- Reads resume and job description text from plain text and PDF files
- Reports simple input statistics (characters, words)

Owns: File format handling and text acquisition
Never: Scores or interprets the text it reads
"""

from atsmatch.contexts.intake.exceptions import (
    IntakeError,
    TextExtractionError,
    UnsupportedFileTypeError,
)
from atsmatch.contexts.intake.reader import SUPPORTED_SUFFIXES, read_text_file
from atsmatch.contexts.intake.statistics import TextStatistics, text_statistics

__all__ = [
    "read_text_file",
    "SUPPORTED_SUFFIXES",
    "text_statistics",
    "TextStatistics",
    "IntakeError",
    "TextExtractionError",
    "UnsupportedFileTypeError",
]
