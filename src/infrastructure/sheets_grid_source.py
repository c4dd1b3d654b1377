"""Google Sheets adapter providing the raw net worth grid."""

from urllib.parse import quote

import requests

from src.application.ports.grid_source import GridSourceError
from src.infrastructure.logging.logger import get_app_logger


SHEETS_VALUES_URL = (
    "https://sheets.googleapis.com/v4/spreadsheets/"
    "{spreadsheet_id}/values/{sheet_range}"
)


class GoogleSheetsGridSource:
    """GridSourcePort implementation backed by the Sheets values API."""

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_range: str,
        api_key: str,
        logger=None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            spreadsheet_id: Spreadsheet identifier.
            sheet_range: A1 range to read, including the sheet name.
            api_key: API key with read access to the spreadsheet.
            logger: Optional logger compatible with logging.Logger-like API.
            timeout: HTTP timeout in seconds.
            session: Optional requests session (useful for tests).
        """
        self._spreadsheet_id = spreadsheet_id
        self._sheet_range = sheet_range
        self._api_key = api_key
        self._logger = logger or get_app_logger()
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return SHEETS_VALUES_URL.format(
            spreadsheet_id=quote(self._spreadsheet_id, safe=""),
            sheet_range=quote(self._sheet_range, safe="!:"),
        )

    def fetch_grid(self) -> list[list[str]]:
        """Fetch the configured range as rows of string cells.

        Returns:
            list[list[str]]: Rows as returned by the API; trailing empty
            cells are omitted by Google, so rows may differ in length.

        Raises:
            GridSourceError: On transport failure, an error status, an
                unreadable body or a response without values.
        """
        try:
            response = self._session.get(
                self.url,
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            self._logger.error(f"Error fetching data from Google Sheets: {exc}")
            raise GridSourceError(
                f"Google Sheets request failed: {exc}"
            ) from exc

        if not response.ok:
            detail = self._error_detail(response)
            message = (
                f"Google Sheets API error: {response.status_code} "
                f"{response.reason}"
            )
            if detail:
                message = f"{message} - {detail}"
            self._logger.error(message)
            raise GridSourceError(message)

        try:
            payload = response.json()
        except ValueError as exc:
            raise GridSourceError(
                "Google Sheets returned a response that is not JSON"
            ) from exc

        values = payload.get("values") if isinstance(payload, dict) else None
        if not values:
            raise GridSourceError("No data found in the spreadsheet")

        self._logger.info(f"Fetched {len(values)} rows from Google Sheets")
        return [
            ["" if cell is None else str(cell) for cell in row]
            for row in values
        ]

    def validate_connection(self) -> bool:
        """Return True when the range can be fetched."""
        try:
            self.fetch_grid()
        except GridSourceError as exc:
            self._logger.warning(
                f"Google Sheets connection validation failed: {exc}"
            )
            return False
        return True

    @staticmethod
    def _error_detail(response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return ""
        if not isinstance(payload, dict):
            return ""
        error = payload.get("error")
        if isinstance(error, dict):
            return str(error.get("message") or "")
        return ""


__all__ = ["GoogleSheetsGridSource", "SHEETS_VALUES_URL"]
