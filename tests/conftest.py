"""Shared test fixtures."""

import logging
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pattern_catalog.infrastructure.database.connection import DatabaseConnection
from pattern_catalog.shared.config.settings import DatabaseSettings, Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_process_state():
    """Forget the shared connection and cached settings around every test."""
    DatabaseConnection.reset_instance()
    get_settings.cache_clear()
    yield
    DatabaseConnection.reset_instance()
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings with in-memory database and default sample data."""
    return Settings(database=DatabaseSettings(url="sqlite:///:memory:"))


@pytest.fixture
def catalog_logs(caplog):
    """Capture INFO records from the package loggers."""
    caplog.set_level(logging.INFO, logger="pattern_catalog")
    return caplog
