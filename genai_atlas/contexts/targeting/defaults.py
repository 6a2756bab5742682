"""
Fixed lookup tables for GenAI Atlas targeting.

Provides shared constants used by:
- filters.py (goal keywords, timeline -> difficulty labels, sort order)
- difficulty.py (timeline / investment / ROI lookups)
- fit_score.py (score weights)

These values are hand-tuned; the fit score is a fixed additive rule set.
"""

from typing import Dict, List

# Keywords searched (case-insensitively) in a use case's results, per goal
GOAL_KEYWORDS: Dict[str, List[str]] = {
    "work-faster": [
        "time",
        "faster",
        "speed",
        "hours",
        "minutes",
        "reduction",
        "automated",
        "quick",
        "saved",
        "week",
        "days",
    ],
    "work-better": [
        "quality",
        "accuracy",
        "satisfaction",
        "improvement",
        "better",
        "enhanced",
        "outcomes",
    ],
    "work-at-scale": [
        "scale",
        "capacity",
        "volume",
        "served",
        "handled",
        "reach",
        "expansion",
        "equivalent to",
    ],
}

# Substring searched in challenge/solution text by the goal filter, whatever the goal
GOAL_FALLBACK_TERM = "time"

# Difficulty labels allowed per timeline; matched as substrings of raw framework difficulty
TIMELINE_DIFFICULTY: Dict[str, List[str]] = {
    "quick-wins": ["Low", "Low to Medium"],
    "balanced": ["Medium", "Medium to High"],
    "transformative": ["High", "Very High"],
}

# Difficulty buckets, easiest first
DIFFICULTY_ORDER = ["Low", "Medium", "High", "Very High"]
DEFAULT_DIFFICULTY = "Medium"

TIMELINE_ESTIMATES = {
    "Low": "3-6 months",
    "Medium": "6-12 months",
    "High": "12-18 months",
    "Very High": "18+ months",
}

INVESTMENT_LEVELS = {
    "Low": "Low-Medium",
    "Medium": "Medium",
    "High": "Medium-High",
    "Very High": "High",
}

ROI_TIMELINES = {
    "Low": "6-12 months",
    "Medium": "12-18 months",
    "High": "18-24 months",
    "Very High": "24-36+ months",
}

# Fit score weights
INDUSTRY_MATCH_POINTS = 10
ORG_SIZE_MATCH_POINTS = 5
LARGE_ORG_POINTS = 3
TIMELINE_MATCH_POINTS = 5
GOAL_MATCH_POINTS = 8
MAX_FIT_SCORE = (
    INDUSTRY_MATCH_POINTS + ORG_SIZE_MATCH_POINTS + TIMELINE_MATCH_POINTS + GOAL_MATCH_POINTS
)

# Org size -> difficulty bucket that earns the org-size bonus
ORG_SIZE_DIFFICULTY = {
    "Small": "Low",
    "Medium": "Medium",
}

# Industry filter value meaning "no industry filter"
ALL_INDUSTRIES = "All"

DEFAULT_RECOMMENDATION_LIMIT = 3
DEFAULT_RELATED_LIMIT = 3
SUMMARY_RESULT_COUNT = 3
