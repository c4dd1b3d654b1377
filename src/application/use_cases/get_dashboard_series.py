"""Use case to build the dashboard net worth series."""

from src.application.ports.grid_source import GridSourcePort
from src.domain.constants import ALL_PERIODS, DEFAULT_CURRENCY
from src.domain.models import DEFAULT_LAYOUT, DashboardSeries, GridLayout
from src.domain.services import (
    AssemblyMode,
    assemble_entries,
    build_series,
    filter_by_period,
    validate_entries,
    warn_subtotal_divergences,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSeriesUseCase:
    """Fetch the grid and return the net worth series for a period."""

    def __init__(
        self,
        grid_source: GridSourcePort,
        logger=None,
        layout: GridLayout | None = None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            grid_source: Port providing the raw grid.
            logger: Optional logger compatible with logging.Logger-like API.
            layout: Optional grid layout; defaults to ``DEFAULT_LAYOUT``.
            currency_code: Currency reported in the summary.
        """
        self._grid_source = grid_source
        self._logger = logger or get_app_logger()
        self._layout = layout or DEFAULT_LAYOUT
        self._currency_code = currency_code

    def execute(self, period: str = ALL_PERIODS) -> DashboardSeries:
        """Return the series filtered to ``period`` with a fresh summary.

        Args:
            period: ``all``, ``1month``, ``3months`` or ``6months``.

        Returns:
            DashboardSeries: Filtered entries; growth figures are computed
            over the filtered window.

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
        if not validate_entries(entries):
            self._logger.warning("No valid net worth entries found")
        warn_subtotal_divergences(entries, self._logger)

        filtered = filter_by_period(entries, period)
        self._logger.info(
            f"Dashboard series for period={period}: "
            f"{len(filtered)} of {len(entries)} entries"
        )
        return build_series(filtered, self._currency_code)


__all__ = ["GetDashboardSeriesUseCase"]
