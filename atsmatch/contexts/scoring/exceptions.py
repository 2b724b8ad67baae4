"""Custom exceptions for the scoring context."""

from typing import List, Optional


class ScoringConfigError(ValueError):
    """
    Exception raised when a scoring configuration is invalid.

    Scoring itself never raises; only loading or validating a configuration can.

    Attributes:
        message: Error description
        fields: Names of the offending configuration fields, if known
    """

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        self.message = message
        self.fields = fields or []

        parts = [message]
        if self.fields:
            parts.append(f"Fields: {', '.join(self.fields)}")

        super().__init__("\n".join(parts))
