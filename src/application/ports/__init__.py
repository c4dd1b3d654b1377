"""Application ports package."""

from .grid_source import (
    GridSourceError,
    GridSourcePort,
    GridSourceUnavailableError,
)

__all__ = [
    "GridSourcePort",
    "GridSourceError",
    "GridSourceUnavailableError",
]
