"""CLI adapter printing the dashboard net worth series as JSON.

The period is read from ``NETWORTH_PERIOD`` (all, 1month, 3months or
6months); the grid source is selected by the infrastructure settings.
"""

import os
import sys

from src.application.ports.grid_source import GridSourceError
from src.application.use_cases.get_dashboard_series import (
    GetDashboardSeriesUseCase,
)
from src.adapters.cli_support import (
    report_configuration_error,
    report_failure,
    resolve_period,
)
from src.infrastructure.container import (
    build_grid_source,
    build_layout,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.currency_format import format_currency_short
from src.utils.serialization import to_json


def main() -> int:
    """Fetch the grid, build the series and print it."""
    logger = get_app_logger()
    period = resolve_period(os.getenv("NETWORTH_PERIOD"), logger)
    settings = build_settings()
    try:
        layout = build_layout(settings)
        grid_source = build_grid_source(settings)
        use_case = GetDashboardSeriesUseCase(
            grid_source=grid_source,
            logger=logger,
            layout=layout,
            currency_code=settings.currency_code,
        )
        series = use_case.execute(period)
    except GridSourceError as exc:
        return report_failure(exc, logger)
    except (RuntimeError, ValueError) as exc:
        return report_configuration_error(exc, logger)

    summary = series.summary
    get_usage_logger().info(f"networth_cli period={period}")
    logger.info(
        f"Net worth {format_currency_short(summary.current_net_worth)} "
        f"({summary.period}), growth {summary.growth_rate:.2f}%"
    )
    print(to_json(series))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
