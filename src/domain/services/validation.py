"""Domain validation helpers."""

from collections.abc import Sequence
from dataclasses import dataclass
from logging import Logger

from src.domain.constants import SUBTOTAL_TOLERANCE
from src.domain.models import NetWorthEntry


@dataclass(frozen=True)
class SubtotalDivergence:
    """Category whose grid subtotal differs from the sum of its items."""

    date: str
    category: str
    subtotal: float
    item_sum: float

    @property
    def difference(self) -> float:
        return self.subtotal - self.item_sum


def validate_entries(entries: Sequence[NetWorthEntry]) -> bool:
    """Return True when entries are non-empty, dated and positive.

    Args:
        entries: Assembled net worth entries.

    Returns:
        bool: False for an empty sequence or any entry without a date or
        with a non-positive net worth.
    """
    if not entries:
        return False
    return all(entry.date and entry.net_worth > 0 for entry in entries)


def find_subtotal_divergences(
    entry: NetWorthEntry,
    tolerance: float = SUBTOTAL_TOLERANCE,
) -> list[SubtotalDivergence]:
    """Compare each category subtotal with the sum of its items.

    Only meaningful for snapshot entries, where each item carries the
    entry's own value. Subtotals are reported, never corrected.

    Args:
        entry: Snapshot entry to check.
        tolerance: Largest absolute difference accepted as consistent.

    Returns:
        list[SubtotalDivergence]: One record per inconsistent category.
    """
    divergences: list[SubtotalDivergence] = []
    for category, block in (
        ("bank_accounts", entry.bank_accounts),
        ("investments", entry.investments),
        ("other_assets", entry.other_assets),
        ("debt", entry.debt),
    ):
        item_sum = block.item_sum()
        if abs(block.subtotal - item_sum) > tolerance:
            divergences.append(
                SubtotalDivergence(
                    date=entry.date,
                    category=category,
                    subtotal=block.subtotal,
                    item_sum=item_sum,
                )
            )
    return divergences


def warn_subtotal_divergences(
    entries: Sequence[NetWorthEntry],
    logger: Logger,
    tolerance: float = SUBTOTAL_TOLERANCE,
) -> list[SubtotalDivergence]:
    """Log a warning for every subtotal divergence across entries."""
    found: list[SubtotalDivergence] = []
    for entry in entries:
        for divergence in find_subtotal_divergences(entry, tolerance):
            logger.warning(
                f"Subtotal mismatch for {divergence.category} on "
                f"{divergence.date}: subtotal={divergence.subtotal}, "
                f"items={divergence.item_sum}"
            )
            found.append(divergence)
    return found


__all__ = [
    "SubtotalDivergence",
    "validate_entries",
    "find_subtotal_divergences",
    "warn_subtotal_divergences",
]
