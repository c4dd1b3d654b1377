"""Tests for the investment and performance report CLIs."""

import json
from unittest.mock import MagicMock

from src.adapters import investment_report_cli, performance_report_cli
from src.application.ports.grid_source import GridSourceUnavailableError
from src.infrastructure.settings import SheetsSettings


class _FakeGridSource:
    def __init__(self, grid) -> None:
        self._grid = grid

    def fetch_grid(self):
        return self._grid


def _patch_module(monkeypatch, module, grid_source_factory):
    monkeypatch.setattr(module, "get_app_logger", MagicMock)
    monkeypatch.setattr(module, "get_usage_logger", MagicMock)
    monkeypatch.setattr(module, "build_settings", SheetsSettings)
    monkeypatch.setattr(module, "build_grid_source", grid_source_factory)


def test_investment_report_prints_analytics(monkeypatch, capsys, sample_grid):
    """The investment CLI prints per-investment analytics."""
    _patch_module(
        monkeypatch,
        investment_report_cli,
        lambda settings: _FakeGridSource(sample_grid),
    )

    assert investment_report_cli.main() == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["best_performer"]["name"] == "Equity Mutual Fund"
    assert payload["holdings"][0]["asset_class"] == "equity"


def test_performance_report_prints_report(monkeypatch, capsys, sample_grid):
    """The performance CLI prints metrics for the requested period."""
    monkeypatch.setenv("NETWORTH_PERIOD", "1month")
    _patch_module(
        monkeypatch,
        performance_report_cli,
        lambda settings: _FakeGridSource(sample_grid),
    )

    assert performance_report_cli.main() == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["period"] == "Mar, 2025 - Mar, 2025"
    assert payload["debt_risk"]["level"] == "medium"


def test_unconfigured_source_exits_with_failure(monkeypatch, capsys):
    """An unconfigured source is reported on stderr."""

    def _unavailable(settings):
        raise GridSourceUnavailableError("Google Sheets backend is not available")

    _patch_module(monkeypatch, investment_report_cli, _unavailable)

    assert investment_report_cli.main() == 1
    assert "not available" in capsys.readouterr().err
