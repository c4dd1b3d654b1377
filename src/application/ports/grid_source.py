"""Application port for reading the raw net worth grid."""

from typing import Protocol


class GridSourceError(RuntimeError):
    """Raised when the grid cannot be fetched or read at all."""


class GridSourceUnavailableError(GridSourceError):
    """Raised when the grid source is not configured."""


class GridSourcePort(Protocol):
    """Port exposing the raw 2-D grid of string cells."""

    def fetch_grid(self) -> list[list[str]]:
        """Return the grid as rows of cells.

        Raises:
            GridSourceError: If the source cannot be read.
        """


__all__ = [
    "GridSourcePort",
    "GridSourceError",
    "GridSourceUnavailableError",
]
