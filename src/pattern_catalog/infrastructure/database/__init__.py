"""Database connection singleton."""

from pattern_catalog.infrastructure.database.connection import DatabaseConnection, safe_url

__all__ = ["DatabaseConnection", "safe_url"]
