"""Tests for the grid layout configuration."""

import pytest

from src.domain.models import DEFAULT_LAYOUT, GridLayout, LayoutAnchor, RowRange


def test_default_layout_round_trips_through_mapping() -> None:
    """to_mapping output should rebuild the same layout."""
    mapping = DEFAULT_LAYOUT.to_mapping()

    assert mapping["bank_accounts_start"] == 6
    assert mapping["debt_end"] == 55
    assert GridLayout.from_mapping(mapping) == DEFAULT_LAYOUT


def test_from_mapping_overrides_selected_offsets() -> None:
    """Partial mappings should inherit the remaining offsets from base."""
    layout = GridLayout.from_mapping(
        {
            "net_worth_row": 80,
            "investments_end": 30,
            "anchors": [{"row": 5, "column": 2, "label": "Bank Accounts"}],
        },
        base=DEFAULT_LAYOUT,
    )

    assert layout.net_worth_row == 80
    assert layout.investments == RowRange(21, 30)
    assert layout.bank_accounts == DEFAULT_LAYOUT.bank_accounts
    assert layout.anchors == (LayoutAnchor(5, 2, "Bank Accounts"),)


def test_from_mapping_rejects_unknown_keys() -> None:
    """Typos in layout files should not be silently ignored."""
    with pytest.raises(ValueError, match="Unknown grid layout keys"):
        GridLayout.from_mapping({"net_worht_row": 1}, base=DEFAULT_LAYOUT)


def test_from_mapping_requires_all_offsets_without_base() -> None:
    """Missing required offsets should raise."""
    with pytest.raises(ValueError, match="Missing grid layout keys"):
        GridLayout.from_mapping({"net_worth_row": 1})


def test_optional_rows_default_to_none() -> None:
    """Change rows are optional."""
    mapping = DEFAULT_LAYOUT.to_mapping()
    mapping.pop("month_change_row")
    mapping.pop("year_change_row")

    layout = GridLayout.from_mapping(mapping)

    assert layout.month_change_row is None
    assert layout.year_change_row is None
    assert list(layout.data_columns) == list(range(3, 27))
