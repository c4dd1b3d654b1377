"""CLI adapter printing performance, debt and allocation analytics."""

import os
import sys

from src.application.ports.grid_source import GridSourceError
from src.application.use_cases.get_performance_report import (
    GetPerformanceReportUseCase,
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
from src.utils.serialization import to_json


def main() -> int:
    """Fetch the grid and print the report for ``NETWORTH_PERIOD``."""
    logger = get_app_logger()
    period = resolve_period(os.getenv("NETWORTH_PERIOD"), logger)
    settings = build_settings()
    try:
        use_case = GetPerformanceReportUseCase(
            grid_source=build_grid_source(settings),
            logger=logger,
            layout=build_layout(settings),
        )
        report = use_case.execute(period)
    except GridSourceError as exc:
        return report_failure(exc, logger)
    except (RuntimeError, ValueError) as exc:
        return report_configuration_error(exc, logger)

    get_usage_logger().info(f"performance_report_cli period={period}")
    print(to_json(report))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
