"""Logging setup shared by the CLI and demos."""

import logging
import sys

from pattern_catalog.shared.config.settings import LoggingSettings

ROOT_LOGGER_NAME = "pattern_catalog"


def configure_logging(settings: LoggingSettings | None = None, verbose: bool = False) -> None:
    """Configure console logging.

    Args:
        settings: Logging settings (defaults are used when omitted)
        verbose: Force DEBUG level regardless of settings
    """
    settings = settings or LoggingSettings()
    level = logging.DEBUG if verbose else getattr(logging, settings.level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=settings.format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def get_logger(area: str) -> logging.Logger:
    """Get a logger namespaced under the package root."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{area}")
