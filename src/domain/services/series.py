"""Dashboard series and chart-ready projections of net worth entries."""

from collections.abc import Sequence

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    AssetCategorySeries,
    ChartPoint,
    DashboardSeries,
    DashboardSummary,
    DebtSeries,
    NetWorthEntry,
)
from src.domain.services.growth import (
    calculate_debt_to_asset_ratio,
    calculate_growth_rate,
    calculate_total_growth,
)


def period_label(entries: Sequence[NetWorthEntry]) -> str:
    """Return ``"<first date> - <last date>"`` or ``"No data"``."""
    if not entries:
        return "No data"
    return f"{entries[0].date} - {entries[-1].date}"


def build_series(
    entries: Sequence[NetWorthEntry],
    currency_code: str = DEFAULT_CURRENCY,
) -> DashboardSeries:
    """Summarise entries for the presentation layer.

    Args:
        entries: Chronological entries, already filtered by period.
        currency_code: Currency of every amount in the grid.

    Returns:
        DashboardSeries: Entries with current net worth, growth and the
        covered period. An empty input yields zeroed figures.
    """
    summary = DashboardSummary(
        current_net_worth=entries[-1].net_worth if entries else 0.0,
        total_growth=calculate_total_growth(entries),
        growth_rate=calculate_growth_rate(entries),
        period=period_label(entries),
        currency=currency_code,
    )
    return DashboardSeries(entries=tuple(entries), summary=summary)


def chart_points(entries: Sequence[NetWorthEntry]) -> list[ChartPoint]:
    """Return net worth points labelled without commas (``"Apr 2025"``)."""
    return [
        ChartPoint(x=entry.date.replace(",", ""), y=entry.net_worth)
        for entry in entries
    ]


def monthly_growth_trend(entries: Sequence[NetWorthEntry]) -> list[float]:
    return [entry.month_over_month_change or 0.0 for entry in entries]


def asset_category_series(
    entries: Sequence[NetWorthEntry],
) -> AssetCategorySeries:
    return AssetCategorySeries(
        dates=tuple(entry.date for entry in entries),
        bank_accounts=tuple(entry.bank_accounts.subtotal for entry in entries),
        investments=tuple(entry.investments.subtotal for entry in entries),
        other_assets=tuple(entry.other_assets.subtotal for entry in entries),
    )


def debt_series(entries: Sequence[NetWorthEntry]) -> DebtSeries:
    return DebtSeries(
        dates=tuple(entry.date for entry in entries),
        total_debt=tuple(entry.total_debt for entry in entries),
        debt_to_asset_ratio=tuple(
            calculate_debt_to_asset_ratio(entry) for entry in entries
        ),
    )


__all__ = [
    "period_label",
    "build_series",
    "chart_points",
    "monthly_growth_trend",
    "asset_category_series",
    "debt_series",
]
