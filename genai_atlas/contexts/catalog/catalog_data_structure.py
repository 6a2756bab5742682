"""
Catalog Data Structures

Defines data classes for the records of the bundled dataset: use cases,
their sources, intervention frameworks, the implementation guide and the
intervention taxonomy. Records are immutable once loaded (sequences are
stored as tuples).
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from genai_atlas.utils.text_formatting import to_list
from genai_atlas.utils.timestamp import parse_date

SECTORS = ("Private", "Public", "Nonprofit", "Public/Education")


def _as_tuple(value: Any) -> Tuple:
    """Coerce a list-like field (or None) to a tuple."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Source:
    """
    Published source backing a use case.

    Attributes:
        url: Link to the source
        publisher: Publishing organization
        footnote: Citation text
    """

    url: str
    publisher: str
    footnote: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Source":
        return cls(
            url=data["url"],
            publisher=data.get("publisher", ""),
            footnote=data.get("footnote", ""),
        )


@dataclass(frozen=True)
class UseCase:
    """
    One documented real-world GenAI deployment.

    Attributes:
        id: Unique, stable identifier
        organization: Deploying organization
        sector: One of SECTORS
        industry: Free-text industry label (used for exact-match filtering)
        use_case_category: Category label (used for framework matching)
        specific_application: What was actually built
        challenge: Problem being solved
        solution: How GenAI was applied
        results: Result statements in display order
        key_insight: Takeaway for readers
        sources: Sources, the first one is the primary source
        tags: Free labels
        last_reviewed: Date the record was last checked
    """

    id: str
    organization: str
    sector: str
    industry: str
    use_case_category: str
    specific_application: str
    challenge: str
    solution: str
    results: Tuple[str, ...] = ()
    key_insight: str = ""
    sources: Tuple[Source, ...] = ()
    tags: Tuple[str, ...] = ()
    last_reviewed: Optional[date] = None

    @property
    def primary_source(self) -> Optional[Source]:
        """First listed source, or None when the record has no sources."""
        return self.sources[0] if self.sources else None

    def summary_results(self, n: int = 3) -> Tuple[str, ...]:
        """First n results, as shown in summary views."""
        return self.results[:n]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UseCase":
        """
        Build a UseCase from a raw dataset record.

        Raises:
            KeyError: If a required field is missing
            ValueError: If last_reviewed is not an ISO date
        """
        last_reviewed = data.get("last_reviewed")
        return cls(
            id=str(data["id"]),
            organization=data["organization"],
            sector=data["sector"],
            industry=data["industry"],
            use_case_category=data["use_case_category"],
            specific_application=data.get("specific_application", ""),
            challenge=data.get("challenge", ""),
            solution=data.get("solution", ""),
            results=_as_tuple(data.get("results")),
            key_insight=data.get("key_insight", ""),
            sources=tuple(Source.from_dict(s) for s in data.get("sources") or []),
            tags=_as_tuple(data.get("tags")),
            last_reviewed=parse_date(last_reviewed) if last_reviewed else None,
        )


@dataclass(frozen=True)
class Framework:
    """
    Category-level description of an intervention type.

    difficulty_level is free text that contains one of Low / Medium / High /
    Very High, possibly as a compound ("Low to Medium"). The raw text is kept
    as-is because timeline filtering matches against it directly.
    """

    intervention_type: str
    sub_category: str
    value_proposition: str
    typical_use_cases: str
    difficulty_level: str
    technology_maturity: str = ""
    time_to_value: str = ""
    investment_level: str = ""
    key_success_factors: str = ""
    common_challenges: str = ""
    ROI_timeline: str = ""
    examples: Tuple[str, ...] = ()

    def success_factors(self):
        return to_list(self.key_success_factors)

    def challenges(self):
        return to_list(self.common_challenges)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Framework":
        return cls(
            intervention_type=data["intervention_type"],
            sub_category=data.get("sub_category", ""),
            value_proposition=data.get("value_proposition", ""),
            typical_use_cases=data.get("typical_use_cases") or "",
            difficulty_level=data.get("difficulty_level") or "",
            technology_maturity=data.get("technology_maturity", ""),
            time_to_value=data.get("time_to_value", ""),
            investment_level=data.get("investment_level", ""),
            key_success_factors=data.get("key_success_factors", ""),
            common_challenges=data.get("common_challenges", ""),
            ROI_timeline=data.get("ROI_timeline", ""),
            examples=_as_tuple(data.get("examples")),
        )


@dataclass(frozen=True)
class ImplementationGuide:
    """Implementation guidance for one dimension/category of adoption."""

    dimension: str
    category: str
    top_use_cases: Tuple[str, ...] = ()
    primary_value: str = ""
    typical_ROI: str = ""
    quick_wins: Tuple[str, ...] = ()
    strategic_plays: Tuple[str, ...] = ()
    key_sources: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImplementationGuide":
        return cls(
            dimension=data["dimension"],
            category=data["category"],
            top_use_cases=_as_tuple(data.get("top_use_cases")),
            primary_value=data.get("primary_value", ""),
            typical_ROI=data.get("typical_ROI", ""),
            quick_wins=_as_tuple(data.get("quick_wins")),
            strategic_plays=_as_tuple(data.get("strategic_plays")),
            key_sources=_as_tuple(data.get("key_sources")),
        )


@dataclass(frozen=True)
class InterventionTaxonomy:
    """Taxonomy entry defining an intervention type."""

    id: str
    name: str
    definition: str
    typical_difficulty: str = ""
    success_factors: str = ""
    examples: Optional[str] = None
    typical_value: Optional[str] = None
    tech: Tuple[str, ...] = field(default_factory=tuple)
    recommended_metrics: Optional[str] = None
    time_to_value: Optional[str] = None
    last_reviewed: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InterventionTaxonomy":
        last_reviewed = data.get("last_reviewed")
        return cls(
            id=str(data["id"]),
            name=data["name"],
            definition=data["definition"],
            typical_difficulty=data.get("typical_difficulty", ""),
            success_factors=data.get("success_factors", ""),
            examples=data.get("examples"),
            typical_value=data.get("typical_value"),
            tech=_as_tuple(data.get("tech")),
            recommended_metrics=data.get("recommended_metrics"),
            time_to_value=data.get("time_to_value"),
            last_reviewed=parse_date(last_reviewed) if last_reviewed else None,
        )
