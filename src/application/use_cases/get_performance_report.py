"""Use case to compute performance, debt and allocation analytics."""

from dataclasses import dataclass

from src.application.ports.grid_source import GridSourcePort
from src.domain.constants import ALL_PERIODS
from src.domain.models import (
    DEFAULT_LAYOUT,
    AllocationScore,
    AllocationSlice,
    AssetAllocation,
    DebtAnalytics,
    DebtRisk,
    GridLayout,
    PerformanceMetrics,
)
from src.domain.services import (
    AssemblyMode,
    asset_allocation_breakdown,
    assemble_entries,
    calculate_allocation_score,
    calculate_asset_allocation,
    calculate_debt_analytics,
    calculate_performance_metrics,
    classify_debt_risk,
    filter_by_period,
)
from src.domain.services.series import period_label
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PerformanceReport:
    """Supplementary analytics for one period window."""

    period: str
    metrics: PerformanceMetrics
    debt: DebtAnalytics
    debt_risk: DebtRisk
    allocation: AssetAllocation
    allocation_breakdown: tuple[AllocationSlice, ...]
    allocation_score: AllocationScore


class GetPerformanceReportUseCase:
    """Compute performance metrics, debt analytics and allocation."""

    def __init__(
        self,
        grid_source: GridSourcePort,
        logger=None,
        layout: GridLayout | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            grid_source: Port providing the raw grid.
            logger: Optional logger compatible with logging.Logger-like API.
            layout: Optional grid layout; defaults to ``DEFAULT_LAYOUT``.
        """
        self._grid_source = grid_source
        self._logger = logger or get_app_logger()
        self._layout = layout or DEFAULT_LAYOUT

    def execute(self, period: str = ALL_PERIODS) -> PerformanceReport:
        """Return the report for the trailing window named by ``period``.

        Allocation figures describe the latest entry of the window; an
        empty window reports zero allocation.

        Raises:
            GridSourceError: If the grid cannot be fetched.
        """
        grid = self._grid_source.fetch_grid()
        entries = assemble_entries(
            grid,
            self._layout,
            AssemblyMode.SNAPSHOT,
            self._logger,
        )
        window = filter_by_period(entries, period)
        debt = calculate_debt_analytics(window)

        if window:
            allocation = calculate_asset_allocation(window[-1])
            breakdown = tuple(asset_allocation_breakdown(window[-1]))
        else:
            allocation = AssetAllocation(
                bank_accounts=0.0,
                investments=0.0,
                other_assets=0.0,
            )
            breakdown = ()

        self._logger.info(
            f"Performance report for period={period} over "
            f"{len(window)} entries"
        )
        return PerformanceReport(
            period=period_label(window),
            metrics=calculate_performance_metrics(window),
            debt=debt,
            debt_risk=classify_debt_risk(debt.debt_to_asset_ratio),
            allocation=allocation,
            allocation_breakdown=breakdown,
            allocation_score=calculate_allocation_score(allocation),
        )


__all__ = ["GetPerformanceReportUseCase", "PerformanceReport"]
