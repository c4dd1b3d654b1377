"""Application use cases package."""

from .check_grid_source import CheckGridSourceUseCase, SourceHealth
from .error_messages import describe_grid_error
from .get_dashboard_series import GetDashboardSeriesUseCase
from .get_investment_analytics import GetInvestmentAnalyticsUseCase
from .get_performance_report import (
    GetPerformanceReportUseCase,
    PerformanceReport,
)

__all__ = [
    "CheckGridSourceUseCase",
    "SourceHealth",
    "describe_grid_error",
    "GetDashboardSeriesUseCase",
    "GetInvestmentAnalyticsUseCase",
    "GetPerformanceReportUseCase",
    "PerformanceReport",
]
