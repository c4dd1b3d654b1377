"""Simple CLI to validate the grid source connection.

Reports ``mock`` when no credentials are configured, otherwise tries a
fetch and reports ``healthy`` or ``unhealthy``.
"""

import sys

from src.application.ports.grid_source import GridSourceUnavailableError
from src.application.use_cases.check_grid_source import CheckGridSourceUseCase
from src.adapters.cli_support import report_configuration_error
from src.infrastructure.container import build_grid_source, build_settings
from src.infrastructure.logging.logger import get_app_logger
from src.utils.serialization import to_json


def main() -> int:
    """Run the health check and print its result."""
    logger = get_app_logger()
    settings = build_settings()
    grid_source = None
    if settings.is_configured:
        try:
            grid_source = build_grid_source(settings)
        except GridSourceUnavailableError as exc:
            logger.warning(f"Grid source cannot be built: {exc}")
        except ValueError as exc:
            return report_configuration_error(exc, logger)

    use_case = CheckGridSourceUseCase(
        grid_source=grid_source,
        configured=settings.is_configured,
        logger=logger,
    )
    health = use_case.execute()
    logger.info(f"Grid source status: {health.status}")
    print(to_json(health))
    return 1 if health.status == "unhealthy" else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
