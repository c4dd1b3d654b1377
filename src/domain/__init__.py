"""Domain package for net worth extraction and analytics."""

from .constants import DEFAULT_CURRENCY, PERIOD_WINDOWS
from .models import (
    DEFAULT_LAYOUT,
    CategoryBlock,
    DashboardSeries,
    DashboardSummary,
    GridLayout,
    InvestmentAnalytics,
    InvestmentVelocity,
    LineItem,
    NetWorthEntry,
)
from .policies import categorize_investment
from .services import (
    AssemblyMode,
    assemble_entries,
    build_series,
    calculate_investment_analytics,
    filter_by_period,
    parse_amount,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "PERIOD_WINDOWS",
    "DEFAULT_LAYOUT",
    "GridLayout",
    "LineItem",
    "CategoryBlock",
    "NetWorthEntry",
    "DashboardSummary",
    "DashboardSeries",
    "InvestmentVelocity",
    "InvestmentAnalytics",
    "categorize_investment",
    "AssemblyMode",
    "assemble_entries",
    "build_series",
    "calculate_investment_analytics",
    "filter_by_period",
    "parse_amount",
]
