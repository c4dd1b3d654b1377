"""Factory helpers to select the grid source backend."""

from src.application.ports.grid_source import (
    GridSourcePort,
    GridSourceUnavailableError,
)
from src.infrastructure.csv_grid_source import CsvGridSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import SheetsSettings
from src.infrastructure.sheets_grid_source import GoogleSheetsGridSource


def create_grid_source(
    settings: SheetsSettings,
    logger=None,
) -> GridSourcePort:
    """Return a grid source implementation based on configuration.

    Args:
        settings: Backend selection and credentials.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        GridSourcePort: Concrete grid source.

    Raises:
        GridSourceUnavailableError: If the backend is not configured.
        ValueError: If the backend name is not supported.
    """
    resolved_logger = logger or get_app_logger()

    if settings.backend == "sheets":
        if not settings.has_credentials:
            raise GridSourceUnavailableError(
                "Google Sheets backend is not available. Please configure "
                "GOOGLE_SHEETS_API_KEY and GOOGLE_SHEETS_SPREADSHEET_ID "
                "environment variables."
            )
        return GoogleSheetsGridSource(
            spreadsheet_id=settings.spreadsheet_id,
            sheet_range=settings.sheet_range,
            api_key=settings.api_key,
            logger=resolved_logger,
            timeout=settings.timeout,
        )

    if settings.backend == "csv":
        if settings.csv_file is None:
            raise GridSourceUnavailableError(
                "CSV backend requires a NETWORTH_CSV_FILE path."
            )
        return CsvGridSource(settings.csv_file, logger=resolved_logger)

    raise ValueError(
        "Unsupported grid source backend: "
        f"{settings.backend}. Expected sheets or csv."
    )


__all__ = ["create_grid_source"]
