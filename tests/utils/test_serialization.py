"""Tests for JSON serialization of domain objects."""

import json

from src.domain.models import AssetClass, InvestmentHolding, LineItem
from src.domain.services.series import build_series
from src.utils.serialization import to_json, to_primitive


def test_to_primitive_flattens_dataclasses_and_enums() -> None:
    """Dataclasses become dicts, enums their values, tuples lists."""
    holding = InvestmentHolding(
        name="Gold",
        value=10.0,
        percentage=100.0,
        asset_class=AssetClass.ALTERNATIVE,
    )

    assert to_primitive(holding) == {
        "name": "Gold",
        "value": 10.0,
        "percentage": 100.0,
        "asset_class": "alternative",
    }
    assert to_primitive(LineItem("FD", (1.0, 2.0))) == {
        "name": "FD",
        "values": [1.0, 2.0],
    }


def test_to_json_keeps_unicode(entry_factory) -> None:
    """JSON output should be readable and parseable."""
    series = build_series([entry_factory(date="Jan, 2025")])

    text = to_json({"symbol": "₹", "series": series})
    payload = json.loads(text)

    assert "₹" in text
    assert payload["series"]["summary"]["period"] == "Jan, 2025 - Jan, 2025"
    assert payload["series"]["entries"][0]["month_over_month_change"] is None
