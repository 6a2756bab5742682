"""
Framework matching for use cases.

A use case is linked to at most one framework by heuristic text matching;
the link is never stored in the dataset. Frameworks are scanned in
declaration order and the first match wins, so several frameworks may match
a use case but only the earliest is used.
"""

from typing import Dict, Optional, Sequence

from genai_atlas.contexts.catalog.catalog_data_structure import Framework, UseCase
from genai_atlas.contexts.targeting.logger import _log_debug


def framework_matches(framework: Framework, use_case: UseCase) -> bool:
    """
    Check whether a framework matches a use case.

    Matches if either:
    - the framework's typical_use_cases text contains the use case category, or
    - any framework example contains the use case organization name

    Both checks are case-insensitive substring checks.
    """
    category = use_case.use_case_category.lower()
    if category in framework.typical_use_cases.lower():
        return True

    organization = use_case.organization.lower()
    return any(organization in example.lower() for example in framework.examples)


def match_framework(use_case: UseCase, frameworks: Sequence[Framework]) -> Optional[Framework]:
    """
    Find the first framework (in declaration order) matching a use case.

    Args:
        use_case: Use case to classify
        frameworks: Frameworks in declaration order

    Returns:
        First matching Framework, or None if nothing matches
    """
    for framework in frameworks:
        if framework_matches(framework, use_case):
            return framework
    return None


class FrameworkMatcher:
    """
    Memoizing framework matcher.

    Results (including misses) are cached per use case id. Both the dataset
    and the frameworks are static for the life of the process, so the cache
    only needs clearing if a new dataset is loaded.
    """

    def __init__(self, frameworks: Sequence[Framework]):
        """
        Args:
            frameworks: Frameworks in declaration order
        """
        self.frameworks = tuple(frameworks)
        self._cache: Dict[str, Optional[Framework]] = {}

    def match(self, use_case: UseCase) -> Optional[Framework]:
        """
        Get the framework for a use case, computing and caching it if necessary.

        Returns:
            Matching Framework, or None if no framework matches
        """
        if use_case.id in self._cache:
            return self._cache[use_case.id]

        framework = match_framework(use_case, self.frameworks)
        if framework is None:
            _log_debug(f"No framework matches use case '{use_case.id}'")
        else:
            _log_debug(
                f"Use case '{use_case.id}' matched framework '{framework.intervention_type}'"
            )

        self._cache[use_case.id] = framework
        return framework

    def is_cached(self, use_case_id: str) -> bool:
        """Check if a use case's match result is in the cache."""
        return use_case_id in self._cache

    def clear_cache(self):
        """Clear the match cache."""
        self._cache.clear()
