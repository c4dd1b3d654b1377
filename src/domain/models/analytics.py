"""Domain models produced by the analytics services."""

from dataclasses import dataclass, field
from enum import Enum


class RiskLevel(str, Enum):
    """Qualitative risk bucket."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Trend(str, Enum):
    """Direction of recent monthly returns."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class AssetClass(str, Enum):
    """Asset classes inferred from investment names."""

    EQUITY = "equity"
    DEBT = "debt"
    HYBRID = "hybrid"
    ALTERNATIVE = "alternative"


@dataclass(frozen=True)
class AssetAllocation:
    """Share of total assets held in each top-level category, in percent."""

    bank_accounts: float
    investments: float
    other_assets: float


@dataclass(frozen=True)
class AllocationSlice:
    """One non-empty category of the asset allocation breakdown."""

    category: str
    value: float
    percentage: float


@dataclass(frozen=True)
class AllocationScore:
    """Heuristic allocation health score with feedback text."""

    score: int
    feedback: str


@dataclass(frozen=True)
class PerformanceHighlight:
    """Month-over-month change for a single entry."""

    month: str
    change: float
    index: int | None = None


@dataclass(frozen=True)
class PerformanceHighlights:
    """Best and worst months of a series."""

    best_month: PerformanceHighlight
    worst_month: PerformanceHighlight


@dataclass(frozen=True)
class PerformanceMetrics:
    """Return and risk statistics of a net worth series."""

    cagr: float
    volatility: float
    max_drawdown: float
    best_month: PerformanceHighlight
    worst_month: PerformanceHighlight
    average_monthly_growth: float


@dataclass(frozen=True)
class DebtAnalytics:
    """Debt level, trend and payoff estimate."""

    total_debt: float
    debt_to_asset_ratio: float
    monthly_reduction: float
    projected_payoff_months: int | None = None


@dataclass(frozen=True)
class DebtRisk:
    """Qualitative classification of a debt-to-asset ratio."""

    level: RiskLevel
    description: str


@dataclass(frozen=True)
class AssetCategorySeries:
    """Per-category subtotals aligned with entry dates."""

    dates: tuple[str, ...]
    bank_accounts: tuple[float, ...]
    investments: tuple[float, ...]
    other_assets: tuple[float, ...]


@dataclass(frozen=True)
class DebtSeries:
    """Debt totals and debt-to-asset ratios aligned with entry dates."""

    dates: tuple[str, ...]
    total_debt: tuple[float, ...]
    debt_to_asset_ratio: tuple[float, ...]


@dataclass(frozen=True)
class InvestmentVelocity:
    """Growth, consistency and risk profile of one investment."""

    name: str
    current_value: float
    growth_rate: float
    absolute_growth: float
    consistency_score: float
    risk_score: RiskLevel
    trend: Trend
    monthly_returns: tuple[float, ...] = ()


@dataclass(frozen=True)
class AssetClassAllocation:
    """Share of total investment value per asset class, in percent."""

    equity: float
    debt: float
    hybrid: float
    alternative: float


@dataclass(frozen=True)
class InvestmentHolding:
    """Current value of one investment and its share of the portfolio."""

    name: str
    value: float
    percentage: float
    asset_class: AssetClass


@dataclass(frozen=True)
class InvestmentAnalytics:
    """Portfolio-level view over all investment velocities."""

    velocities: tuple[InvestmentVelocity, ...]
    best_performer: InvestmentVelocity
    worst_performer: InvestmentVelocity
    most_consistent: InvestmentVelocity
    highest_contributor: InvestmentVelocity
    diversification_score: float
    overall_risk_score: float
    average_growth_rate: float
    total_investment_value: float
    asset_class_allocation: AssetClassAllocation
    holdings: tuple[InvestmentHolding, ...] = field(default_factory=tuple)


__all__ = [
    "RiskLevel",
    "Trend",
    "AssetClass",
    "AssetAllocation",
    "AllocationSlice",
    "AllocationScore",
    "PerformanceHighlight",
    "PerformanceHighlights",
    "PerformanceMetrics",
    "DebtAnalytics",
    "DebtRisk",
    "AssetCategorySeries",
    "DebtSeries",
    "InvestmentVelocity",
    "AssetClassAllocation",
    "InvestmentHolding",
    "InvestmentAnalytics",
]
