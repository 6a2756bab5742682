"""Unit tests for difficulty classification and derived estimates."""

import pytest

from genai_atlas.contexts.targeting import (
    classify_difficulty,
    difficulty_level,
    investment_level,
    raw_difficulty,
    roi_timeline,
    timeline_estimate,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, bucket",
    [
        ("Low", "Low"),
        ("Low to Medium", "Medium"),
        ("Medium", "Medium"),
        ("Medium to High", "High"),
        ("High", "High"),
        ("Very High", "Very High"),
        ("Moderate", "Low"),
        ("", "Medium"),
        (None, "Medium"),
    ],
)
def test_classify_difficulty(text, bucket):
    """Free-text difficulty maps to a bucket, highest label first."""
    assert classify_difficulty(text) == bucket


@pytest.mark.unit
def test_raw_difficulty(case, matcher):
    """Raw difficulty is the matched framework's text, or None without a framework."""
    assert raw_difficulty(case("klarna-customer-service"), matcher) == "Low to Medium"
    assert raw_difficulty(case("dhl-demand-planning"), matcher) is None


@pytest.mark.unit
def test_difficulty_level_always_a_bucket(use_cases, matcher):
    """Every use case gets one of the four buckets."""
    for use_case in use_cases:
        assert difficulty_level(use_case, matcher) in {"Low", "Medium", "High", "Very High"}


@pytest.mark.unit
def test_no_framework_defaults_to_medium(case, matcher):
    """A use case without a framework falls back to the Medium lookups."""
    dhl = case("dhl-demand-planning")
    assert difficulty_level(dhl, matcher) == "Medium"
    assert timeline_estimate(dhl, matcher) == "6-12 months"
    assert investment_level(dhl, matcher) == "Medium"
    assert roi_timeline(dhl, matcher) == "12-18 months"


@pytest.mark.unit
def test_very_high_derivations(case, matcher):
    """Very High difficulty yields the longest estimates."""
    insilico = case("insilico-drug-discovery")
    assert difficulty_level(insilico, matcher) == "Very High"
    assert timeline_estimate(insilico, matcher) == "18+ months"
    assert investment_level(insilico, matcher) == "High"
    assert roi_timeline(insilico, matcher) == "24-36+ months"


@pytest.mark.unit
def test_low_and_high_derivations(case, matcher):
    """Low and High buckets map to their fixed lookups."""
    heinz = case("heinz-ai-ketchup")
    assert timeline_estimate(heinz, matcher) == "3-6 months"
    assert investment_level(heinz, matcher) == "Low-Medium"
    assert roi_timeline(heinz, matcher) == "6-12 months"

    jpmorgan = case("jpmorgan-payment-validation")
    assert timeline_estimate(jpmorgan, matcher) == "12-18 months"
    assert investment_level(jpmorgan, matcher) == "Medium-High"
    assert roi_timeline(jpmorgan, matcher) == "18-24 months"
