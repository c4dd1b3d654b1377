"""Tests for entry validation and subtotal checks."""

from dataclasses import replace
from unittest.mock import MagicMock

from src.domain.models import CategoryBlock, LineItem
from src.domain.services.assembly import assemble_snapshot_entries
from src.domain.services.validation import (
    find_subtotal_divergences,
    validate_entries,
    warn_subtotal_divergences,
)


def test_validate_entries(entry_factory) -> None:
    """Entries need a date and a positive net worth."""
    assert validate_entries([]) is False
    assert validate_entries([entry_factory()]) is True
    assert validate_entries([entry_factory(net_worth=0.0)]) is False
    assert validate_entries([entry_factory(date="")]) is False


def test_consistent_grid_has_no_divergences(sample_grid) -> None:
    """Subtotals derived from the items should match them."""
    entries = assemble_snapshot_entries(sample_grid)

    assert all(not find_subtotal_divergences(entry) for entry in entries)


def test_divergence_is_reported_not_corrected(entry_factory) -> None:
    """A subtotal that disagrees with its items is reported."""
    entry = entry_factory(date="Jan, 2025", bank=150.0)
    entry = replace(
        entry,
        bank_accounts=CategoryBlock(
            items=(LineItem("Savings", (100.0,)),),
            subtotal=150.0,
        ),
    )
    logger = MagicMock()

    found = warn_subtotal_divergences([entry], logger)

    assert len(found) == 1
    assert found[0].category == "bank_accounts"
    assert found[0].difference == 50
    assert entry.bank_accounts.subtotal == 150
    logger.warning.assert_called_once()


def test_divergence_within_tolerance_is_ignored(entry_factory) -> None:
    """Rounding noise under the tolerance is accepted."""
    entry = entry_factory(
        investments=100.5,
        investment_items=[LineItem("Fund", (100.0,))],
    )

    assert find_subtotal_divergences(entry) == []
    assert len(find_subtotal_divergences(entry, tolerance=0.1)) == 1
