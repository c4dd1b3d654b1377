"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Optional

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import DEFAULT_LAYOUT, GridLayout
from src.infrastructure.logging.logger import get_app_logger


PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"
PLACEHOLDER_SPREADSHEET_ID = "YOUR_SPREADSHEET_ID_HERE"
DEFAULT_SHEET_RANGE = "Net Worth Tracker!A1:AA125"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class SheetsSettings:
    """Settings for selecting and reaching the grid source.

    Attributes:
        backend: Backend identifier (sheets or csv).
        spreadsheet_id: Google Sheets spreadsheet identifier.
        sheet_range: A1 range covering the whole tracker.
        api_key: Google Sheets API key.
        csv_file: Optional path to a local CSV export of the sheet.
        layout_file: Optional JSON file overriding grid layout offsets.
        currency_code: Currency of the amounts in the grid.
        timeout: HTTP timeout in seconds.
    """

    backend: str = "sheets"
    spreadsheet_id: Optional[str] = None
    sheet_range: str = DEFAULT_SHEET_RANGE
    api_key: Optional[str] = None
    csv_file: Optional[Path] = None
    layout_file: Optional[Path] = None
    currency_code: str = DEFAULT_CURRENCY
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "SheetsSettings":
        """Build settings from environment variables.

        Returns:
            SheetsSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = os.getenv("NETWORTH_BACKEND", "sheets").strip().lower()
        raw_csv = os.getenv("NETWORTH_CSV_FILE")
        raw_layout = os.getenv("NETWORTH_LAYOUT_FILE")
        return cls(
            backend=backend,
            spreadsheet_id=os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID") or None,
            sheet_range=(
                os.getenv("GOOGLE_SHEETS_RANGE") or DEFAULT_SHEET_RANGE
            ),
            api_key=os.getenv("GOOGLE_SHEETS_API_KEY") or None,
            csv_file=(
                cls._normalize_path(raw_csv, logger=logger)
                if raw_csv
                else None
            ),
            layout_file=(
                cls._normalize_path(raw_layout, logger=logger)
                if raw_layout
                else None
            ),
            currency_code=(
                os.getenv("NETWORTH_CURRENCY", DEFAULT_CURRENCY).strip().upper()
                or DEFAULT_CURRENCY
            ),
            timeout=cls._parse_timeout(
                os.getenv("GOOGLE_SHEETS_TIMEOUT"),
                logger=logger,
            ),
        )

    @property
    def has_credentials(self) -> bool:
        """Return True when real Google Sheets credentials are present."""
        return bool(
            self.api_key
            and self.spreadsheet_id
            and self.api_key != PLACEHOLDER_API_KEY
            and self.spreadsheet_id != PLACEHOLDER_SPREADSHEET_ID
        )

    @property
    def is_configured(self) -> bool:
        """Return True when the selected backend has what it needs."""
        if self.backend == "csv":
            return self.csv_file is not None
        return self.has_credentials

    def load_layout(self) -> GridLayout:
        """Return the grid layout, applying the optional override file.

        Returns:
            GridLayout: ``DEFAULT_LAYOUT`` merged with the JSON overrides.

        Raises:
            RuntimeError: If the layout file cannot be read or parsed.
            ValueError: If the layout file names unknown keys.
        """
        if self.layout_file is None:
            return DEFAULT_LAYOUT
        try:
            raw = json.loads(Path(self.layout_file).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(
                f"Cannot read grid layout file {self.layout_file}: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise RuntimeError(
                f"Grid layout file {self.layout_file} must hold a JSON object"
            )
        return GridLayout.from_mapping(raw, base=DEFAULT_LAYOUT)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve a filesystem path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved path, even when the file does not exist.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Configured file does not exist at {path}")
        return path

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        if not raw_value:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid GOOGLE_SHEETS_TIMEOUT '{raw_value}'; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning(
                f"GOOGLE_SHEETS_TIMEOUT must be positive; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = [
    "SheetsSettings",
    "PLACEHOLDER_API_KEY",
    "PLACEHOLDER_SPREADSHEET_ID",
    "DEFAULT_SHEET_RANGE",
]
