"""Domain models package."""

from .analytics import (
    AllocationScore,
    AllocationSlice,
    AssetAllocation,
    AssetCategorySeries,
    AssetClass,
    AssetClassAllocation,
    DebtAnalytics,
    DebtRisk,
    DebtSeries,
    InvestmentAnalytics,
    InvestmentHolding,
    InvestmentVelocity,
    PerformanceHighlight,
    PerformanceHighlights,
    PerformanceMetrics,
    RiskLevel,
    Trend,
)
from .grid_layout import DEFAULT_LAYOUT, GridLayout, LayoutAnchor, RowRange
from .net_worth import (
    CategoryBlock,
    ChartPoint,
    DashboardSeries,
    DashboardSummary,
    LineItem,
    NetWorthEntry,
)

__all__ = [
    "LineItem",
    "CategoryBlock",
    "NetWorthEntry",
    "DashboardSummary",
    "DashboardSeries",
    "ChartPoint",
    "RowRange",
    "LayoutAnchor",
    "GridLayout",
    "DEFAULT_LAYOUT",
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
