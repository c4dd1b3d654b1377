"""Use case to report the health of the grid source."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from src.application.ports.grid_source import GridSourceError, GridSourcePort
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SourceHealth:
    """Connectivity status of the grid source.

    Attributes:
        status: ``healthy``, ``unhealthy`` or ``mock``.
        timestamp: ISO-8601 time of the check.
        connected: Whether the grid could be fetched.
        message: Human-readable explanation.
        last_update: Time of the last successful fetch, when connected.
    """

    status: str
    timestamp: str
    connected: bool
    message: str
    last_update: str | None = None


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CheckGridSourceUseCase:
    """Probe the grid source unless it is not configured."""

    def __init__(
        self,
        grid_source: GridSourcePort | None,
        configured: bool,
        logger=None,
        clock: Callable[[], str] = _utc_now,
    ) -> None:
        """Initialize the use case.

        Args:
            grid_source: Port providing the raw grid; may be None when the
                source is not configured.
            configured: Whether credentials or a file path are configured.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current timestamp string.
        """
        self._grid_source = grid_source
        self._configured = configured
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(self) -> SourceHealth:
        """Return the health of the grid source.

        Returns:
            SourceHealth: ``mock`` when unconfigured, otherwise ``healthy``
            or ``unhealthy`` depending on a fetch attempt.
        """
        timestamp = self._clock()
        if not self._configured or self._grid_source is None:
            return SourceHealth(
                status="mock",
                timestamp=timestamp,
                connected=False,
                message=(
                    "Running in mock mode - grid source credentials "
                    "not configured"
                ),
            )

        try:
            self._grid_source.fetch_grid()
        except GridSourceError as exc:
            self._logger.error(f"Grid source health check failed: {exc}")
            return SourceHealth(
                status="unhealthy",
                timestamp=timestamp,
                connected=False,
                message=f"Grid source connection failed: {exc}",
            )

        return SourceHealth(
            status="healthy",
            timestamp=timestamp,
            connected=True,
            message="Grid source connection is healthy",
            last_update=timestamp,
        )


__all__ = ["CheckGridSourceUseCase", "SourceHealth"]
