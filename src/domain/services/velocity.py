"""Per-investment velocity and portfolio concentration analytics."""

from collections.abc import Callable, Sequence
from statistics import fmean, pstdev

from src.domain.constants import (
    CONSISTENCY_STDDEV_CEILING,
    RISK_LOW_MAX_STDDEV,
    RISK_MEDIUM_MAX_STDDEV,
    RISK_WEIGHTS,
    TREND_DOWN_BELOW,
    TREND_UP_ABOVE,
    TREND_WINDOW,
)
from src.domain.models import (
    AssetClass,
    AssetClassAllocation,
    InvestmentAnalytics,
    InvestmentHolding,
    InvestmentVelocity,
    LineItem,
    NetWorthEntry,
    RiskLevel,
    Trend,
)
from src.domain.policies import categorize_investment


def monthly_returns(values: Sequence[float]) -> list[float]:
    """Return consecutive percentage returns.

    Steps whose starting value is not positive are skipped.
    """
    return [
        (current - previous) / previous * 100
        for previous, current in zip(values, values[1:])
        if previous > 0
    ]


def calculate_consistency_score(returns: Sequence[float]) -> float:
    """Return a 0-100 score that falls as monthly returns get noisier.

    A monthly standard deviation of 20% or more scores 0.
    """
    stddev = pstdev(returns) if returns else 0.0
    score = 100 - stddev / CONSISTENCY_STDDEV_CEILING * 100
    return round(max(0.0, score), 1)


def classify_risk(returns: Sequence[float]) -> RiskLevel:
    """Bucket the standard deviation of monthly returns."""
    stddev = pstdev(returns) if returns else 0.0
    if stddev <= RISK_LOW_MAX_STDDEV:
        return RiskLevel.LOW
    if stddev <= RISK_MEDIUM_MAX_STDDEV:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def classify_trend(returns: Sequence[float]) -> Trend:
    """Classify the mean of the most recent monthly returns."""
    recent = list(returns)[-TREND_WINDOW:]
    if not recent:
        return Trend.STABLE
    average = fmean(recent)
    if average > TREND_UP_ABOVE:
        return Trend.UP
    if average < TREND_DOWN_BELOW:
        return Trend.DOWN
    return Trend.STABLE


def calculate_investment_velocity(item: LineItem) -> InvestmentVelocity:
    """Compute growth, consistency, risk and trend for one investment.

    Args:
        item: Investment row carrying its full value history.

    Returns:
        InvestmentVelocity: Neutral profile when the history has fewer
        than two positive values.
    """
    values = [value for value in item.values if value > 0]
    if len(values) < 2:
        return neutral_velocity(item.name, values[-1] if values else 0.0)

    first, last = values[0], values[-1]
    returns = monthly_returns(values)
    return InvestmentVelocity(
        name=item.name,
        current_value=last,
        growth_rate=(last - first) / first * 100,
        absolute_growth=last - first,
        consistency_score=calculate_consistency_score(returns),
        risk_score=classify_risk(returns),
        trend=classify_trend(returns),
        monthly_returns=tuple(returns),
    )


def neutral_velocity(
    name: str = "",
    current_value: float = 0.0,
) -> InvestmentVelocity:
    """Return a velocity with no growth, low risk and a stable trend."""
    return InvestmentVelocity(
        name=name,
        current_value=current_value,
        growth_rate=0.0,
        absolute_growth=0.0,
        consistency_score=0.0,
        risk_score=RiskLevel.LOW,
        trend=Trend.STABLE,
    )


def calculate_diversification_score(values: Sequence[float]) -> float:
    """Return ``100 - HHI / 100`` over the holdings' current values.

    Args:
        values: Current value of each holding.

    Returns:
        float: Score in [0, 100] rounded to one decimal; 0 for a single
        holding or an empty portfolio.
    """
    total = sum(values)
    if total <= 0:
        return 0.0
    hhi = sum((value / total * 100) ** 2 for value in values)
    score = 100 - hhi / 10000 * 100
    return round(min(100.0, max(0.0, score)), 1)


def calculate_overall_risk_score(
    velocities: Sequence[InvestmentVelocity],
) -> float:
    """Return the value-weighted risk (low=1 .. high=3) scaled to 0-100."""
    total = sum(velocity.current_value for velocity in velocities)
    if total <= 0:
        return 0.0
    weighted = sum(
        RISK_WEIGHTS[velocity.risk_score.value] * velocity.current_value
        for velocity in velocities
    )
    return weighted / total / 3 * 100


def calculate_asset_class_allocation(
    velocities: Sequence[InvestmentVelocity],
) -> AssetClassAllocation:
    """Return the share of current investment value per asset class."""
    totals = {asset_class: 0.0 for asset_class in AssetClass}
    for velocity in velocities:
        totals[categorize_investment(velocity.name)] += velocity.current_value
    grand_total = sum(totals.values())

    def _share(asset_class: AssetClass) -> float:
        if grand_total <= 0:
            return 0.0
        return totals[asset_class] / grand_total * 100

    return AssetClassAllocation(
        equity=_share(AssetClass.EQUITY),
        debt=_share(AssetClass.DEBT),
        hybrid=_share(AssetClass.HYBRID),
        alternative=_share(AssetClass.ALTERNATIVE),
    )


def investment_holdings(
    velocities: Sequence[InvestmentVelocity],
) -> list[InvestmentHolding]:
    """Return non-empty holdings sorted by current value, largest first."""
    total = sum(velocity.current_value for velocity in velocities)
    holdings = [
        InvestmentHolding(
            name=velocity.name,
            value=velocity.current_value,
            percentage=velocity.current_value / total * 100 if total else 0.0,
            asset_class=categorize_investment(velocity.name),
        )
        for velocity in velocities
        if velocity.current_value > 0
    ]
    return sorted(holdings, key=lambda holding: holding.value, reverse=True)


def calculate_investment_analytics(
    items: Sequence[LineItem],
) -> InvestmentAnalytics:
    """Aggregate velocities of all investments into portfolio analytics.

    Each winner slot is an independent first-occurrence-wins scan, so one
    investment may fill several slots.

    Args:
        items: Investment rows with full value history.

    Returns:
        InvestmentAnalytics: Zeroed analytics with neutral winners when
        there are no investments.
    """
    velocities = [calculate_investment_velocity(item) for item in items]
    return InvestmentAnalytics(
        velocities=tuple(velocities),
        best_performer=_select(velocities, lambda v: v.growth_rate),
        worst_performer=_select(velocities, lambda v: -v.growth_rate),
        most_consistent=_select(velocities, lambda v: v.consistency_score),
        highest_contributor=_select(velocities, lambda v: v.absolute_growth),
        diversification_score=calculate_diversification_score(
            [velocity.current_value for velocity in velocities]
        ),
        overall_risk_score=calculate_overall_risk_score(velocities),
        average_growth_rate=(
            fmean(velocity.growth_rate for velocity in velocities)
            if velocities
            else 0.0
        ),
        total_investment_value=sum(
            velocity.current_value for velocity in velocities
        ),
        asset_class_allocation=calculate_asset_class_allocation(velocities),
        holdings=tuple(investment_holdings(velocities)),
    )


def investment_analytics_from_entries(
    entries: Sequence[NetWorthEntry],
) -> InvestmentAnalytics:
    """Compute investment analytics from full-history entries.

    Args:
        entries: Entries assembled in history mode; the latest entry's
            investment items are used.

    Returns:
        InvestmentAnalytics: Analytics of the latest entry's investments.
    """
    if not entries:
        return calculate_investment_analytics(())
    return calculate_investment_analytics(entries[-1].investments.items)


def _select(
    velocities: Sequence[InvestmentVelocity],
    key: Callable[[InvestmentVelocity], float],
) -> InvestmentVelocity:
    if not velocities:
        return neutral_velocity()
    selected = velocities[0]
    for velocity in velocities[1:]:
        if key(velocity) > key(selected):
            selected = velocity
    return selected


__all__ = [
    "monthly_returns",
    "calculate_consistency_score",
    "classify_risk",
    "classify_trend",
    "calculate_investment_velocity",
    "neutral_velocity",
    "calculate_diversification_score",
    "calculate_overall_risk_score",
    "calculate_asset_class_allocation",
    "investment_holdings",
    "calculate_investment_analytics",
    "investment_analytics_from_entries",
]
