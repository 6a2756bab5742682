"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for opportunity listings on the command line.
"""

from typing import Any, List

from genai_atlas.utils.text_formatting import truncate_text


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
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment, truncating text that overflows the column."""
        text = str(value)
        if len(text) > self.width:
            text = truncate_text(text, max(self.width - 3, 0))
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = None):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators (defaults to the sum of column widths)
        """
        self.columns = columns
        if total_width is None:
            total_width = sum(col.width for col in columns) + len(columns) - 1
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        """Add horizontal separator line."""
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Args:
            values: List of values (one per column)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_summary(self, text: str) -> "TableFormatter":
        """Add summary line (typically after table data)."""
        self.lines.append(f"\n{text}")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        """Add arbitrary text line."""
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)


def format_match_count(count: int, empty_label: str = None) -> str:
    """
    Format a result count for display next to a filter option.

    Examples:
        format_match_count(1)                                  # "1 match"
        format_match_count(4)                                  # "4 matches"
        format_match_count(0, empty_label="No matches yet")    # "No matches yet"
    """
    if count == 0 and empty_label:
        return empty_label
    return f"{count} match{'' if count == 1 else 'es'}"
