"""Tests for the investment categorization rules."""

import pytest

from src.domain.models import AssetClass
from src.domain.policies import (
    DEFAULT_CATEGORY_RULES,
    CategoryRule,
    categorize_investment,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Axis Bluechip Equity", AssetClass.EQUITY),
        ("Reliance Shares", AssetClass.EQUITY),
        ("HDFC FD", AssetClass.DEBT),
        ("EPF", AssetClass.DEBT),
        ("Sovereign Gold Bond", AssetClass.ALTERNATIVE),
        ("Land Plot", AssetClass.ALTERNATIVE),
        ("ICICI Mutual Fund", AssetClass.HYBRID),
        ("Parag Parikh Flexi Cap", AssetClass.HYBRID),
    ],
)
def test_default_rules(name, expected) -> None:
    """Default rules match case-insensitive substrings."""
    assert categorize_investment(name) is expected


def test_rule_order_decides_overlaps() -> None:
    """The first matching rule wins."""
    assert categorize_investment("Equity Mutual Fund") is AssetClass.EQUITY


def test_custom_rules_and_default() -> None:
    """Rule tables can be extended without touching scoring code."""
    rules = (CategoryRule("ppf", AssetClass.DEBT), *DEFAULT_CATEGORY_RULES)

    assert categorize_investment("PPF", rules=rules) is AssetClass.DEBT
    assert (
        categorize_investment("Art", default=AssetClass.ALTERNATIVE)
        is AssetClass.ALTERNATIVE
    )
