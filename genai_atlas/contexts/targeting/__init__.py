"""
Targeting Context

Responsibilities:
- Links use cases to intervention frameworks by heuristic text matching
- Derives difficulty, timeline, investment and ROI windows from the matched framework
- Filters and sorts use cases by goal, timeline and industry
- Scores use cases against assessment answers and recommends the best fits
- Powers the advanced explorer and the case detail profile

Owns: Matching heuristics, keyword tables, fit score rules, ranking
Never: Loads dataset files or persists user state
"""

from genai_atlas.contexts.targeting.assessment import (
    ScoredCase,
    goal_match_counts,
    industry_match_counts,
    org_size_match_counts,
    recommend,
    timeline_match_counts,
)
from genai_atlas.contexts.targeting.case_profile import CaseProfile, build_case_profile
from genai_atlas.contexts.targeting.criteria import (
    Difficulty,
    Goal,
    OrgSize,
    SearchCriteria,
    Timeline,
    build_query_string,
    parse_query_params,
)
from genai_atlas.contexts.targeting.difficulty import (
    classify_difficulty,
    difficulty_level,
    investment_level,
    raw_difficulty,
    roi_timeline,
    timeline_estimate,
)
from genai_atlas.contexts.targeting.explorer import ExplorerQuery, ExplorerRow, explore
from genai_atlas.contexts.targeting.filters import (
    filter_opportunities,
    matches_goal,
    matches_timeline,
    related_cases,
    sort_opportunities,
)
from genai_atlas.contexts.targeting.fit_score import Answers, fit_score
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher, match_framework

__all__ = [
    # Matching and derivation
    "FrameworkMatcher",
    "match_framework",
    "raw_difficulty",
    "classify_difficulty",
    "difficulty_level",
    "timeline_estimate",
    "investment_level",
    "roi_timeline",
    # Filtering, sorting, related cases
    "filter_opportunities",
    "matches_goal",
    "matches_timeline",
    "sort_opportunities",
    "related_cases",
    # Scoring and recommendations
    "Answers",
    "fit_score",
    "ScoredCase",
    "recommend",
    "goal_match_counts",
    "timeline_match_counts",
    "industry_match_counts",
    "org_size_match_counts",
    # Explorer and case profile
    "ExplorerQuery",
    "ExplorerRow",
    "explore",
    "CaseProfile",
    "build_case_profile",
    # Criteria vocabulary
    "Goal",
    "Timeline",
    "OrgSize",
    "Difficulty",
    "SearchCriteria",
    "parse_query_params",
    "build_query_string",
]
