"""
Utility functions for formatting text-based reports and tables.

Provides consistent table and list formatting for analysis reports.
"""

from typing import Any, Iterable, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned table columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        """
        Args:
            columns: Column definitions for table rows (may be swapped with set_columns)
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def set_columns(self, columns: List[Column]) -> "TableFormatter":
        """Switch the column layout used by subsequent table rows."""
        self.columns = columns
        return self

    def add_section_header(self, title: str) -> "TableFormatter":
        """
        Add section header with top/bottom separator lines.

        Returns:
            Self for method chaining
        """
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_list(
        self, items: Iterable[str], bullet: str = "-", empty_text: str = "(none)"
    ) -> "TableFormatter":
        """
        Add one bulleted line per item, or a placeholder when there are none.

        Returns:
            Self for method chaining
        """
        items = list(items)
        if not items:
            self.lines.append(f"  {empty_text}")
            return self

        for item in items:
            self.lines.append(f"  {bullet} {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_score_bar(score: int, width: int = 20, fill: str = "#", empty: str = ".") -> str:
    """
    Format a 0-100 score as a fixed-width text progress bar.

    Scores outside [0, 100] are clamped.

    Example:
        >>> format_score_bar(50, width=10)
        '[#####.....]'
    """
    clamped = max(0, min(100, score))
    filled = (clamped * width) // 100
    return f"[{fill * filled}{empty * (width - filled)}]"
