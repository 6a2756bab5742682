"""Unit tests for the case detail profile."""

import pytest

from genai_atlas.contexts.targeting import CaseProfile, build_case_profile
from genai_atlas.contexts.targeting.case_profile import (
    GENERIC_ROADMAP,
    build_implementation_roadmap,
)


@pytest.mark.unit
def test_profile_with_framework(catalog, matcher):
    profile = build_case_profile("jpmorgan-payment-validation", catalog, matcher)

    assert isinstance(profile, CaseProfile)
    assert profile.framework.intervention_type == "Risk and Compliance"
    assert profile.difficulty == "High"
    assert profile.timeline == "12-18 months"
    assert profile.investment == "Medium-High"
    assert profile.roi_timeline == "18-24 months"
    assert profile.success_factors == ["Clean transaction data", "Model governance"]
    assert profile.common_challenges == ["Regulatory approval", "False positives"]
    assert [uc.id for uc in profile.related] == [
        "mastercard-fraud-scoring",
        "bank-of-america-erica",
    ]


@pytest.mark.unit
def test_profile_headline_results(catalog, matcher):
    """Only the first three results are headline results."""
    profile = build_case_profile("klarna-customer-service", catalog, matcher)
    assert len(profile.use_case.results) == 4
    assert profile.headline_results == profile.use_case.results[:3]


@pytest.mark.unit
def test_profile_without_framework(catalog, matcher):
    profile = build_case_profile("dhl-demand-planning", catalog, matcher)

    assert profile.framework is None
    assert profile.difficulty == "Medium"
    assert profile.success_factors == []
    assert profile.common_challenges == []
    assert profile.roadmap == list(GENERIC_ROADMAP)
    assert profile.related == []


@pytest.mark.unit
def test_profile_unknown_id(catalog, matcher):
    assert build_case_profile("no-such-case", catalog, matcher) is None


@pytest.mark.unit
def test_profile_related_limit(catalog, matcher):
    profile = build_case_profile(
        "jpmorgan-payment-validation", catalog, matcher, related_limit=1
    )
    assert [uc.id for uc in profile.related] == ["mastercard-fraud-scoring"]


@pytest.mark.unit
def test_roadmap_phrased_from_framework(frameworks):
    roadmap = build_implementation_roadmap(frameworks[1])

    assert len(roadmap) == 3
    assert "lower fraud losses" in roadmap[0]
    assert "9-12 months" in roadmap[1]
    assert "financial crime" in roadmap[1]
    assert "18-24 months" in roadmap[2]


@pytest.mark.unit
def test_generic_roadmap():
    assert build_implementation_roadmap(None) == list(GENERIC_ROADMAP)
    assert len(GENERIC_ROADMAP) == 3
