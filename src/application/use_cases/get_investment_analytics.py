"""Use case to compute investment velocity analytics."""

from src.application.ports.grid_source import GridSourcePort
from src.domain.models import DEFAULT_LAYOUT, GridLayout, InvestmentAnalytics
from src.domain.services import (
    AssemblyMode,
    assemble_entries,
    investment_analytics_from_entries,
)
from src.infrastructure.logging.logger import get_app_logger


class GetInvestmentAnalyticsUseCase:
    """Compute per-investment and portfolio analytics from the grid."""

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

    def execute(self) -> InvestmentAnalytics:
        """Return analytics over every investment's full value history.

        Raises:
            GridSourceError: If the grid cannot be fetched.
        """
        grid = self._grid_source.fetch_grid()
        entries = assemble_entries(
            grid,
            self._layout,
            AssemblyMode.HISTORY,
            self._logger,
        )
        analytics = investment_analytics_from_entries(entries)
        self._logger.info(
            f"Investment analytics computed for "
            f"{len(analytics.velocities)} investments"
        )
        return analytics


__all__ = ["GetInvestmentAnalyticsUseCase"]
