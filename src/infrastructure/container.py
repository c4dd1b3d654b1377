"""Composition root for wiring infrastructure adapters."""

from src.application.ports.grid_source import GridSourcePort
from src.domain.models import GridLayout
from src.infrastructure.grid_source_factory import create_grid_source
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import SheetsSettings


def build_settings() -> SheetsSettings:
    """Return settings sourced from the environment."""
    return SheetsSettings.from_env()


def build_grid_source(
    settings: SheetsSettings | None = None,
) -> GridSourcePort:
    """Return the configured grid source."""
    resolved = settings or build_settings()
    return create_grid_source(resolved, logger=get_app_logger())


def build_layout(settings: SheetsSettings | None = None) -> GridLayout:
    """Return the grid layout, honouring NETWORTH_LAYOUT_FILE."""
    resolved = settings or build_settings()
    return resolved.load_layout()


__all__ = ["build_settings", "build_grid_source", "build_layout"]
