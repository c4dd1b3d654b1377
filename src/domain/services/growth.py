"""Growth, allocation and performance analytics over net worth entries."""

from collections.abc import Sequence
import math
from statistics import fmean, pstdev

from src.domain.constants import (
    ALLOCATION_FEEDBACK,
    ALLOCATION_SCORE_BANDS,
    BANK_ACCOUNTS_LABEL,
    DEBT_RISK_LOW_BELOW,
    DEBT_RISK_MEDIUM_BELOW,
    INVESTMENTS_LABEL,
    OTHER_ASSETS_LABEL,
)
from src.domain.models import (
    AllocationScore,
    AllocationSlice,
    AssetAllocation,
    DebtAnalytics,
    DebtRisk,
    NetWorthEntry,
    PerformanceHighlight,
    PerformanceHighlights,
    PerformanceMetrics,
    RiskLevel,
)


def calculate_growth_rate(entries: Sequence[NetWorthEntry]) -> float:
    """Return the first-to-last net worth growth in percent.

    Args:
        entries: Chronological net worth entries.

    Returns:
        float: Growth rate, or 0 with fewer than two entries or a zero
        starting net worth.
    """
    if len(entries) < 2:
        return 0.0
    oldest = entries[0].net_worth
    newest = entries[-1].net_worth
    if oldest == 0:
        return 0.0
    return (newest - oldest) / oldest * 100


def calculate_total_growth(entries: Sequence[NetWorthEntry]) -> float:
    """Return the absolute first-to-last net worth change.

    Follows the same guard as ``calculate_growth_rate``: fewer than two
    entries or a zero starting net worth yield 0.
    """
    if len(entries) < 2 or entries[0].net_worth == 0:
        return 0.0
    return entries[-1].net_worth - entries[0].net_worth


def calculate_asset_allocation(entry: NetWorthEntry) -> AssetAllocation:
    """Return each category subtotal as a percentage of total assets.

    Args:
        entry: Usually the latest entry of a series.

    Returns:
        AssetAllocation: Percentages, all 0 when total assets are 0.
    """
    total = entry.total_assets
    if total == 0:
        return AssetAllocation(
            bank_accounts=0.0,
            investments=0.0,
            other_assets=0.0,
        )
    return AssetAllocation(
        bank_accounts=entry.bank_accounts.subtotal / total * 100,
        investments=entry.investments.subtotal / total * 100,
        other_assets=entry.other_assets.subtotal / total * 100,
    )


def asset_allocation_breakdown(entry: NetWorthEntry) -> list[AllocationSlice]:
    """Return labelled allocation slices, omitting empty categories."""
    total = entry.total_assets
    if total == 0:
        return []
    slices = [
        AllocationSlice(
            category=label,
            value=block.subtotal,
            percentage=block.subtotal / total * 100,
        )
        for label, block in (
            (BANK_ACCOUNTS_LABEL, entry.bank_accounts),
            (INVESTMENTS_LABEL, entry.investments),
            (OTHER_ASSETS_LABEL, entry.other_assets),
        )
    ]
    return [item for item in slices if item.value > 0]


def calculate_debt_to_asset_ratio(entry: NetWorthEntry) -> float:
    """Return total debt over total assets in percent (0 without assets)."""
    if entry.total_assets == 0:
        return 0.0
    return entry.total_debt / entry.total_assets * 100


def calculate_cagr(
    initial_value: float,
    final_value: float,
    periods: int,
) -> float:
    """Return the compound growth rate per period in percent.

    Args:
        initial_value: Value at the start of the range.
        final_value: Value at the end of the range.
        periods: Number of compounding periods between the two values.

    Returns:
        float: CAGR, or 0 when ``periods`` or ``initial_value`` is 0 or
        the ratio has no real root.
    """
    if periods == 0 or initial_value == 0:
        return 0.0
    ratio = final_value / initial_value
    if ratio < 0:
        return 0.0
    return (math.pow(ratio, 1 / periods) - 1) * 100


def period_returns(values: Sequence[float]) -> list[float]:
    """Return consecutive fractional returns, skipping zero denominators."""
    return [
        (current - previous) / previous
        for previous, current in zip(values, values[1:])
        if previous != 0
    ]


def calculate_volatility(values: Sequence[float]) -> float:
    """Return the standard deviation of period returns in percent."""
    if len(values) < 2:
        return 0.0
    returns = period_returns(values)
    if not returns:
        return 0.0
    return pstdev(returns) * 100


def calculate_max_drawdown(values: Sequence[float]) -> float:
    """Return the largest peak-to-trough decline in percent."""
    if len(values) < 2:
        return 0.0
    max_drawdown = 0.0
    peak = values[0]
    for value in values[1:]:
        if value > peak:
            peak = value
        elif peak > 0:
            max_drawdown = max(max_drawdown, (peak - value) / peak * 100)
    return max_drawdown


def get_performance_highlights(
    entries: Sequence[NetWorthEntry],
) -> PerformanceHighlights:
    """Return the best and worst month by month-over-month change.

    A change of exactly 0 (or a missing change) marks a month without a
    comparable predecessor and is excluded. Ties keep the earliest month.
    """
    candidates = [
        PerformanceHighlight(
            month=entry.date,
            change=entry.month_over_month_change or 0.0,
            index=index,
        )
        for index, entry in enumerate(entries)
        if entry.month_over_month_change
    ]
    if not candidates:
        empty = PerformanceHighlight(month="", change=0.0)
        return PerformanceHighlights(best_month=empty, worst_month=empty)

    best = worst = candidates[0]
    for candidate in candidates[1:]:
        if candidate.change > best.change:
            best = candidate
        if candidate.change < worst.change:
            worst = candidate
    return PerformanceHighlights(best_month=best, worst_month=worst)


def calculate_allocation_score(allocation: AssetAllocation) -> AllocationScore:
    """Score an allocation against the configured bands.

    Args:
        allocation: Category percentages of total assets.

    Returns:
        AllocationScore: Additive score in [0, 100] with feedback text.
    """
    score = 0
    for attribute, (lower, upper, points) in ALLOCATION_SCORE_BANDS.items():
        if lower <= getattr(allocation, attribute) <= upper:
            score += points

    feedback = ALLOCATION_FEEDBACK[-1][1]
    for threshold, message in ALLOCATION_FEEDBACK:
        if score >= threshold:
            feedback = message
            break
    return AllocationScore(score=score, feedback=feedback)


def calculate_performance_metrics(
    entries: Sequence[NetWorthEntry],
) -> PerformanceMetrics:
    """Return CAGR, volatility, drawdown and monthly highlights."""
    if len(entries) < 2:
        empty = PerformanceHighlight(month="", change=0.0)
        return PerformanceMetrics(
            cagr=0.0,
            volatility=0.0,
            max_drawdown=0.0,
            best_month=empty,
            worst_month=empty,
            average_monthly_growth=0.0,
        )

    net_worth = [entry.net_worth for entry in entries]
    changes = [
        entry.month_over_month_change
        for entry in entries
        if entry.month_over_month_change
    ]
    highlights = get_performance_highlights(entries)
    return PerformanceMetrics(
        cagr=calculate_cagr(net_worth[0], net_worth[-1], len(entries) - 1),
        volatility=calculate_volatility(net_worth),
        max_drawdown=calculate_max_drawdown(net_worth),
        best_month=highlights.best_month,
        worst_month=highlights.worst_month,
        average_monthly_growth=fmean(changes) if changes else 0.0,
    )


def calculate_debt_analytics(
    entries: Sequence[NetWorthEntry],
) -> DebtAnalytics:
    """Return current debt, average monthly reduction and payoff estimate.

    Args:
        entries: Chronological net worth entries.

    Returns:
        DebtAnalytics: Zeros for an empty series. The payoff estimate is
        only set while debt is positive and shrinking.
    """
    if not entries:
        return DebtAnalytics(
            total_debt=0.0,
            debt_to_asset_ratio=0.0,
            monthly_reduction=0.0,
        )

    latest = entries[-1]
    total_debt = latest.total_debt
    monthly_reduction = 0.0
    if len(entries) > 1:
        monthly_reduction = (entries[0].total_debt - total_debt) / (
            len(entries) - 1
        )

    projected_payoff_months = None
    if monthly_reduction > 0 and total_debt > 0:
        projected_payoff_months = math.ceil(total_debt / monthly_reduction)

    return DebtAnalytics(
        total_debt=total_debt,
        debt_to_asset_ratio=calculate_debt_to_asset_ratio(latest),
        monthly_reduction=monthly_reduction,
        projected_payoff_months=projected_payoff_months,
    )


def classify_debt_risk(debt_to_asset_ratio: float) -> DebtRisk:
    """Classify a debt-to-asset ratio (percent) into a risk level."""
    if debt_to_asset_ratio < DEBT_RISK_LOW_BELOW:
        return DebtRisk(RiskLevel.LOW, "Excellent debt management")
    if debt_to_asset_ratio < DEBT_RISK_MEDIUM_BELOW:
        return DebtRisk(RiskLevel.MEDIUM, "Moderate debt levels")
    return DebtRisk(RiskLevel.HIGH, "High debt risk - focus on reduction")


__all__ = [
    "calculate_growth_rate",
    "calculate_total_growth",
    "calculate_asset_allocation",
    "asset_allocation_breakdown",
    "calculate_debt_to_asset_ratio",
    "calculate_cagr",
    "period_returns",
    "calculate_volatility",
    "calculate_max_drawdown",
    "get_performance_highlights",
    "calculate_allocation_score",
    "calculate_performance_metrics",
    "calculate_debt_analytics",
    "classify_debt_risk",
]
