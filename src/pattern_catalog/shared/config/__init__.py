"""Configuration via Pydantic Settings."""

from pattern_catalog.shared.config.settings import (
    CatalogSettings,
    DatabaseSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "DatabaseSettings",
    "LoggingSettings",
    "CatalogSettings",
    "get_settings",
]
