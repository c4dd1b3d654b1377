"""CLI adapter printing investment velocity analytics as JSON."""

import sys

from src.application.ports.grid_source import GridSourceError
from src.application.use_cases.get_investment_analytics import (
    GetInvestmentAnalyticsUseCase,
)
from src.adapters.cli_support import (
    report_configuration_error,
    report_failure,
)
from src.infrastructure.container import (
    build_grid_source,
    build_layout,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.serialization import to_json


def main() -> int:
    """Fetch the grid and print per-investment analytics."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        use_case = GetInvestmentAnalyticsUseCase(
            grid_source=build_grid_source(settings),
            logger=logger,
            layout=build_layout(settings),
        )
        analytics = use_case.execute()
    except GridSourceError as exc:
        return report_failure(exc, logger)
    except (RuntimeError, ValueError) as exc:
        return report_configuration_error(exc, logger)

    get_usage_logger().info("investment_report_cli")
    print(to_json(analytics))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
