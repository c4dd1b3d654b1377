"""Local CSV adapter providing the raw net worth grid."""

import csv
from pathlib import Path

from src.application.ports.grid_source import GridSourceError
from src.infrastructure.logging.logger import get_app_logger


class CsvGridSource:
    """GridSourcePort implementation reading a CSV export of the sheet."""

    def __init__(
        self,
        path: Path | str,
        logger=None,
        encoding: str = "utf-8-sig",
    ) -> None:
        """Initialize the adapter.

        Args:
            path: Path to the CSV export.
            logger: Optional logger compatible with logging.Logger-like API.
            encoding: File encoding; the default tolerates a BOM.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._encoding = encoding

    def fetch_grid(self) -> list[list[str]]:
        """Read every row of the CSV file.

        Raises:
            GridSourceError: If the file cannot be read or is empty.
        """
        try:
            with self._path.open(newline="", encoding=self._encoding) as handle:
                rows = [list(row) for row in csv.reader(handle)]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            self._logger.error(f"Cannot read grid CSV {self._path}: {exc}")
            raise GridSourceError(
                f"Cannot read grid CSV file {self._path}: {exc}"
            ) from exc

        if not rows:
            raise GridSourceError(f"No data found in the CSV file {self._path}")

        self._logger.info(f"Read {len(rows)} rows from {self._path}")
        return rows


__all__ = ["CsvGridSource"]
