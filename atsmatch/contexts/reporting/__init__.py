"""
Reporting Context

Responsibilities:
- Renders analysis results as human-readable text reports
- Serializes analysis results as JSON

Owns: Output layout and formatting
Never: Changes scores or feedback content
"""

from atsmatch.contexts.reporting.formatter import format_analysis_report

__all__ = ["format_analysis_report"]
