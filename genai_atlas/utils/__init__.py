"""
Shared utilities for GenAI Atlas.

Common functionality used across contexts:
- Logging setup
- Timestamps and dates
- Text formatting for results
- Plain-text tables
"""

from genai_atlas.utils.text_formatting import extract_metric, format_result, to_list, truncate_text
from genai_atlas.utils.timestamp import format_date, now_exact, today

__all__ = [
    "extract_metric",
    "format_result",
    "to_list",
    "truncate_text",
    "format_date",
    "now_exact",
    "today",
]
