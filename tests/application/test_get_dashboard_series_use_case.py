"""Tests for the GetDashboardSeriesUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.ports.grid_source import GridSourceError
from src.application.use_cases.get_dashboard_series import (
    GetDashboardSeriesUseCase,
)


class _FakeGridSource:
    def __init__(self, grid=None, error=None) -> None:
        self._grid = grid
        self._error = error
        self.calls = 0

    def fetch_grid(self):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._grid


def test_execute_returns_full_series(sample_grid) -> None:
    """The all period should keep every entry."""
    source = _FakeGridSource(sample_grid)
    use_case = GetDashboardSeriesUseCase(grid_source=source, logger=MagicMock())

    series = use_case.execute()

    assert source.calls == 1
    assert len(series.entries) == 3
    assert series.summary.period == "Jan, 2025 - Mar, 2025"
    assert series.summary.growth_rate == pytest.approx(12.0)


def test_execute_recomputes_summary_for_period(sample_grid) -> None:
    """Filtered windows should get a fresh summary."""
    use_case = GetDashboardSeriesUseCase(
        grid_source=_FakeGridSource(sample_grid),
        logger=MagicMock(),
        currency_code="USD",
    )

    series = use_case.execute("1month")

    assert [entry.date for entry in series.entries] == ["Mar, 2025"]
    assert series.summary.current_net_worth == 896000
    assert series.summary.total_growth == 0
    assert series.summary.period == "Mar, 2025 - Mar, 2025"
    assert series.summary.currency == "USD"


def test_execute_warns_on_empty_series(grid_builder) -> None:
    """A grid with no populated column yields an empty series."""
    grid = grid_builder(dates=["Jan, 2025"], net_worth=[0])
    logger = MagicMock()
    use_case = GetDashboardSeriesUseCase(
        grid_source=_FakeGridSource(grid),
        logger=logger,
    )

    series = use_case.execute()

    assert series.entries == ()
    assert series.summary.period == "No data"
    logger.warning.assert_any_call("No valid net worth entries found")


def test_execute_propagates_fetch_failures() -> None:
    """Upstream failures are not swallowed."""
    use_case = GetDashboardSeriesUseCase(
        grid_source=_FakeGridSource(error=GridSourceError("boom")),
        logger=MagicMock(),
    )

    with pytest.raises(GridSourceError, match="boom"):
        use_case.execute()
