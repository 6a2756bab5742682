"""
Text formatting helpers for case study content.

Results in the dataset are free text with embedded metrics ("cut handling
time by 40%", "served 2x more customers"). These helpers pull those metrics
out or emphasise them for display.
"""

import re
from typing import List, Optional

# Metrics worth emphasising inside a result sentence
METRIC_PATTERN = re.compile(
    r"(\d+%|\d+x|\d+\+|£\d+|€\d+|\$\d+|\d+ days|\d+ hours|\d+ minutes)"
)

# Headline metric: percentages, multipliers and "N+" counts only
HEADLINE_METRIC_PATTERN = re.compile(r"(\d+%|\d+x|\d+\+)")

EMPHASIS_STYLES = {
    "html": r"<strong>\1</strong>",
    "markdown": r"**\1**",
}


def format_result(result: str, style: str = "html") -> str:
    """
    Emphasise the metrics inside a result string.

    Args:
        result: Result sentence from a use case
        style: "html" (<strong>) or "markdown" (**bold**)

    Returns:
        Result with every metric wrapped in emphasis markup

    Raises:
        ValueError: If style is not recognized

    Examples:
        format_result("Cut costs by 25% in 30 days")
        # "Cut costs by <strong>25%</strong> in <strong>30 days</strong>"
    """
    if style not in EMPHASIS_STYLES:
        raise ValueError(f"Unknown emphasis style '{style}'. Available: {list(EMPHASIS_STYLES)}")
    return METRIC_PATTERN.sub(EMPHASIS_STYLES[style], result)


def extract_metric(result: str) -> Optional[str]:
    """Return the first headline metric ("40%", "3x", "700+") in a result, or None."""
    match = HEADLINE_METRIC_PATTERN.search(result)
    return match.group(1) if match else None


def truncate_text(text: str, max_length: int) -> str:
    """
    Truncate text to max_length characters, appending "..." when cut.

    Trailing whitespace of the kept prefix is trimmed before the ellipsis.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."


def to_list(text: Optional[str]) -> List[str]:
    """
    Split a comma-joined string into trimmed, non-empty items.

    Examples:
        to_list("Executive sponsorship, clean data,  ,change management")
        # ["Executive sponsorship", "clean data", "change management"]
    """
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]
