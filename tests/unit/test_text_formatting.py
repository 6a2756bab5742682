"""Unit tests for result text formatting and date helpers."""

from datetime import date

import pytest

from genai_atlas.utils.text_formatting import (
    extract_metric,
    format_result,
    to_list,
    truncate_text,
)
from genai_atlas.utils.timestamp import format_date, format_timestamp, parse_date


@pytest.mark.unit
def test_format_result_html():
    assert (
        format_result("Cut costs by 25% in 30 days")
        == "Cut costs by <strong>25%</strong> in <strong>30 days</strong>"
    )


@pytest.mark.unit
def test_format_result_markdown():
    assert format_result("Served 3x more users", style="markdown") == "Served **3x** more users"


@pytest.mark.unit
def test_format_result_currency_and_counts():
    formatted = format_result("Saved $40 million across 700+ agents")
    assert "<strong>$40</strong>" in formatted
    assert "<strong>700+</strong>" in formatted


@pytest.mark.unit
def test_format_result_without_metrics_unchanged():
    assert format_result("Lowered fraud levels") == "Lowered fraud levels"


@pytest.mark.unit
def test_format_result_unknown_style():
    with pytest.raises(ValueError, match="Unknown emphasis style"):
        format_result("25%", style="latex")


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, metric",
    [
        ("Reduced handling time by 40%", "40%"),
        ("Served 2x more customers", "2x"),
        ("Work of 700+ agents", "700+"),
        ("Saved 30 days per cycle", None),
        ("No numbers at all", None),
    ],
)
def test_extract_metric(text, metric):
    assert extract_metric(text) == metric


@pytest.mark.unit
def test_truncate_text():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("exactly10!", 10) == "exactly10!"
    assert truncate_text("Hello wonderful world", 6) == "Hello..."


@pytest.mark.unit
def test_to_list():
    assert to_list("Executive sponsorship, clean data,  ,change management") == [
        "Executive sponsorship",
        "clean data",
        "change management",
    ]
    assert to_list("") == []
    assert to_list(None) == []


@pytest.mark.unit
def test_format_date():
    assert format_date("2025-01-05") == "January 5, 2025"
    assert format_date(date(2024, 11, 30)) == "November 30, 2024"


@pytest.mark.unit
def test_parse_date():
    assert parse_date("2025-01-15T09:30:00") == date(2025, 1, 15)
    with pytest.raises(ValueError):
        parse_date("15/01/2025")


@pytest.mark.unit
def test_format_timestamp():
    assert format_timestamp("2025-11-13T18:45:40.123456") == "2025-11-13 18:45:40"
    assert format_timestamp("not a timestamp") == "not a timestamp"
