"""Custom exceptions for intake context with file references."""

from pathlib import Path
from typing import Iterable, Optional


class IntakeError(Exception):
    """Base class for errors raised while acquiring input text."""


class UnsupportedFileTypeError(IntakeError):
    """
    Exception raised when an input file has an unsupported suffix.

    Attributes:
        path: The offending file
        supported: Suffixes that can be read
    """

    def __init__(self, path: Path, supported: Iterable[str]):
        self.path = path
        self.supported = tuple(supported)

        super().__init__(
            f"Unsupported file type '{path.suffix or '(none)'}': {path}\n"
            f"Supported types: {', '.join(self.supported)}"
        )


class TextExtractionError(IntakeError):
    """
    Exception raised when text cannot be read from an input file.

    Attributes:
        message: Error description
        path: File that failed to read
        original_error: The underlying I/O or PDF error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"File: {path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
