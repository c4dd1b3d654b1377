"""Shared helpers for command-line adapters."""

import sys

from src.application.use_cases.error_messages import describe_grid_error
from src.domain.constants import ALL_PERIODS, PERIOD_WINDOWS


def resolve_period(raw_period: str | None, logger) -> str:
    """Normalize a period name, falling back to ``all``.

    Args:
        raw_period: Period name from the environment.
        logger: Logger used for warnings.

    Returns:
        str: A known period name.
    """
    period = (raw_period or ALL_PERIODS).strip().lower()
    if period != ALL_PERIODS and period not in PERIOD_WINDOWS:
        logger.warning(
            f"Unknown period '{period}'. Expected one of: "
            f"{', '.join([ALL_PERIODS, *PERIOD_WINDOWS])}. Using all."
        )
        return ALL_PERIODS
    return period


def report_failure(error: Exception, logger) -> int:
    """Log a grid source failure and print its user-facing description.

    Returns:
        int: Process exit status.
    """
    logger.error(f"Grid source failure: {error}")
    print(describe_grid_error(error), file=sys.stderr)
    return 1


def report_configuration_error(error: Exception, logger) -> int:
    """Log an invalid configuration and print it.

    Returns:
        int: Process exit status.
    """
    logger.error(f"Invalid configuration: {error}")
    print(f"Invalid configuration: {error}", file=sys.stderr)
    return 2


__all__ = [
    "resolve_period",
    "report_failure",
    "report_configuration_error",
]
