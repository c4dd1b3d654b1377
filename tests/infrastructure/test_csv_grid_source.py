"""Tests for the CSV grid source adapter."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.application.ports.grid_source import GridSourceError
from src.infrastructure.csv_grid_source import CsvGridSource


def test_fetch_grid_reads_quoted_cells(tmp_path: Path) -> None:
    """Quoted currency cells with commas should stay intact."""
    path = tmp_path / "tracker.csv"
    path.write_text(
        '\ufeff,,Date,"Jan, 2025"\n,,HDFC,"₹2,20,000"\n',
        encoding="utf-8",
    )

    grid = CsvGridSource(path, logger=MagicMock()).fetch_grid()

    assert grid == [
        ["", "", "Date", "Jan, 2025"],
        ["", "", "HDFC", "₹2,20,000"],
    ]


def test_fetch_grid_missing_file(tmp_path: Path) -> None:
    """Missing files raise GridSourceError."""
    source = CsvGridSource(tmp_path / "missing.csv", logger=MagicMock())

    with pytest.raises(GridSourceError, match="Cannot read grid CSV"):
        source.fetch_grid()


def test_fetch_grid_empty_file(tmp_path: Path) -> None:
    """Empty files raise GridSourceError."""
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(GridSourceError, match="No data found"):
        CsvGridSource(path, logger=MagicMock()).fetch_grid()
