"""Domain services package."""

from .assembly import (
    AssemblyMode,
    assemble_entries,
    assemble_from_extraction,
    assemble_history_entries,
    assemble_snapshot_entries,
)
from .extraction import (
    GridExtraction,
    extract_grid,
    extract_line_items,
    verify_layout,
)
from .growth import (
    asset_allocation_breakdown,
    calculate_allocation_score,
    calculate_asset_allocation,
    calculate_cagr,
    calculate_debt_analytics,
    calculate_debt_to_asset_ratio,
    calculate_growth_rate,
    calculate_max_drawdown,
    calculate_performance_metrics,
    calculate_total_growth,
    calculate_volatility,
    classify_debt_risk,
    get_performance_highlights,
)
from .parsing import parse_amount
from .periods import filter_by_period
from .series import (
    asset_category_series,
    build_series,
    chart_points,
    debt_series,
    monthly_growth_trend,
)
from .validation import (
    SubtotalDivergence,
    find_subtotal_divergences,
    validate_entries,
    warn_subtotal_divergences,
)
from .velocity import (
    calculate_diversification_score,
    calculate_investment_analytics,
    calculate_investment_velocity,
    calculate_overall_risk_score,
    investment_analytics_from_entries,
)

__all__ = [
    "parse_amount",
    "GridExtraction",
    "extract_grid",
    "extract_line_items",
    "verify_layout",
    "AssemblyMode",
    "assemble_entries",
    "assemble_from_extraction",
    "assemble_history_entries",
    "assemble_snapshot_entries",
    "calculate_growth_rate",
    "calculate_total_growth",
    "calculate_asset_allocation",
    "asset_allocation_breakdown",
    "calculate_debt_to_asset_ratio",
    "calculate_cagr",
    "calculate_volatility",
    "calculate_max_drawdown",
    "get_performance_highlights",
    "calculate_allocation_score",
    "calculate_performance_metrics",
    "calculate_debt_analytics",
    "classify_debt_risk",
    "calculate_investment_velocity",
    "calculate_diversification_score",
    "calculate_overall_risk_score",
    "calculate_investment_analytics",
    "investment_analytics_from_entries",
    "filter_by_period",
    "build_series",
    "chart_points",
    "monthly_growth_trend",
    "asset_category_series",
    "debt_series",
    "SubtotalDivergence",
    "validate_entries",
    "find_subtotal_divergences",
    "warn_subtotal_divergences",
]
