"""Tests for the GetPerformanceReportUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_performance_report import (
    GetPerformanceReportUseCase,
)
from src.domain.models import RiskLevel


class _FakeGridSource:
    def __init__(self, grid) -> None:
        self._grid = grid

    def fetch_grid(self):
        return self._grid


def test_execute_builds_report(sample_grid) -> None:
    """The report covers metrics, debt and allocation."""
    use_case = GetPerformanceReportUseCase(
        grid_source=_FakeGridSource(sample_grid),
        logger=MagicMock(),
    )

    report = use_case.execute()

    assert report.period == "Jan, 2025 - Mar, 2025"
    assert report.metrics.cagr == pytest.approx(
        ((896000 / 800000) ** 0.5 - 1) * 100
    )
    assert report.metrics.best_month.month == "Mar, 2025"
    assert report.debt.total_debt == 230000
    assert report.debt.monthly_reduction == pytest.approx(10000.0)
    assert report.debt.projected_payoff_months == 23
    assert report.debt_risk.level is RiskLevel.MEDIUM
    assert report.allocation.investments == pytest.approx(
        766000 / 1126000 * 100
    )
    assert [item.category for item in report.allocation_breakdown] == [
        "Bank Accounts",
        "Investments",
        "Other Assets",
    ]
    assert 0 <= report.allocation_score.score <= 100


def test_execute_with_empty_window(grid_builder) -> None:
    """An empty series reports zeroed analytics."""
    grid = grid_builder(dates=["Jan, 2025"], net_worth=[0])
    use_case = GetPerformanceReportUseCase(
        grid_source=_FakeGridSource(grid),
        logger=MagicMock(),
    )

    report = use_case.execute("3months")

    assert report.period == "No data"
    assert report.allocation.investments == 0
    assert report.allocation_breakdown == ()
    assert report.debt.projected_payoff_months is None
    assert report.debt_risk.level is RiskLevel.LOW
