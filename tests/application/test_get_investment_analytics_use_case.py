"""Tests for the GetInvestmentAnalyticsUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_investment_analytics import (
    GetInvestmentAnalyticsUseCase,
)
from src.domain.models import AssetClass


class _FakeGridSource:
    def __init__(self, grid) -> None:
        self._grid = grid

    def fetch_grid(self):
        return self._grid


def test_execute_uses_full_history(sample_grid) -> None:
    """Velocities should span every populated month."""
    logger = MagicMock()
    use_case = GetInvestmentAnalyticsUseCase(
        grid_source=_FakeGridSource(sample_grid),
        logger=logger,
    )

    analytics = use_case.execute()

    assert analytics.best_performer.name == "Equity Mutual Fund"
    assert analytics.worst_performer.name == "EPF"
    assert analytics.total_investment_value == 766000
    assert analytics.holdings[0].asset_class is AssetClass.EQUITY
    assert analytics.asset_class_allocation.debt == pytest.approx(
        306000 / 766000 * 100
    )
    logger.info.assert_called()


def test_execute_without_investments(grid_builder) -> None:
    """A grid without investments gives neutral analytics."""
    grid = grid_builder(
        dates=["Jan, 2025"],
        bank_accounts={"Savings": [1000]},
    )
    use_case = GetInvestmentAnalyticsUseCase(
        grid_source=_FakeGridSource(grid),
        logger=MagicMock(),
    )

    analytics = use_case.execute()

    assert analytics.velocities == ()
    assert analytics.best_performer.name == ""
