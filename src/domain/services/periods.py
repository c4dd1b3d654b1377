"""Trailing-window filtering of net worth series."""

from collections.abc import Sequence

from src.domain.constants import ALL_PERIODS, PERIOD_WINDOWS
from src.domain.models import NetWorthEntry


def filter_by_period(
    entries: Sequence[NetWorthEntry],
    period: str,
) -> Sequence[NetWorthEntry]:
    """Return the trailing window of entries for a named period.

    Args:
        entries: Chronological net worth entries.
        period: ``all``, ``1month``, ``3months`` or ``6months``. Unknown
            names behave like ``all``.

    Returns:
        Sequence[NetWorthEntry]: The last N entries in original order.
        Growth figures are not recomputed.
    """
    if period == ALL_PERIODS or not entries:
        return entries
    window = PERIOD_WINDOWS.get(period, len(entries))
    return entries[-window:]


__all__ = ["filter_by_period"]
