"""Tests for the check_source_cli adapter."""

import json
from unittest.mock import MagicMock

from src.adapters import check_source_cli
from src.application.ports.grid_source import GridSourceError
from src.infrastructure.settings import SheetsSettings


def test_main_reports_mock_without_credentials(monkeypatch, capsys):
    """Without credentials the source is reported as mock."""
    monkeypatch.setattr(check_source_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(check_source_cli, "build_settings", SheetsSettings)

    assert check_source_cli.main() == 0
    assert json.loads(capsys.readouterr().out)["status"] == "mock"


def test_main_reports_unhealthy_source(monkeypatch, capsys):
    """A failing fetch exits with a non-zero status."""
    source = MagicMock()
    source.fetch_grid.side_effect = GridSourceError("connection refused")
    monkeypatch.setattr(check_source_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        check_source_cli,
        "build_settings",
        lambda: SheetsSettings(spreadsheet_id="sheet-1", api_key="key-1"),
    )
    monkeypatch.setattr(
        check_source_cli,
        "build_grid_source",
        lambda settings: source,
    )

    assert check_source_cli.main() == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "unhealthy"
    assert payload["connected"] is False


def test_main_rejects_unsupported_backend(monkeypatch, capsys):
    """An unknown backend is a configuration error, not mock mode."""
    monkeypatch.setattr(check_source_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        check_source_cli,
        "build_settings",
        lambda: SheetsSettings(
            backend="excel",
            spreadsheet_id="sheet-1",
            api_key="key-1",
        ),
    )

    assert check_source_cli.main() == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unsupported grid source backend" in captured.err
