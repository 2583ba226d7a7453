"""Process-wide database connection handle."""

import threading
from typing import ClassVar

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url

from pattern_catalog.shared.config.settings import DatabaseSettings
from pattern_catalog.shared.logging import get_logger

logger = get_logger("database")

# Only get_instance holds this, so direct construction can be refused.
_CREATE_TOKEN = object()


def safe_url(url: str | URL) -> str:
    """Render a database URL with the password hidden."""
    parsed = make_url(url)
    if parsed.host and "@" in parsed.host:
        # Unescaped "@" in the password; the real host follows the last one.
        parsed = parsed.set(host=parsed.host.rsplit("@", 1)[1], password="***")
    return parsed.render_as_string(hide_password=True)


def build_url(settings: DatabaseSettings) -> URL:
    """Combine the configured URL with the separate username and password."""
    url = make_url(settings.url)
    if settings.username is not None:
        url = url.set(username=settings.username)
    if settings.password is not None:
        url = url.set(password=settings.password.get_secret_value())
    return url


class DatabaseConnection:
    """Lazily created singleton wrapping a SQLAlchemy engine.

    Use ``get_instance()``; calling the class directly raises RuntimeError.
    The first caller creates the instance while holding a lock, so
    concurrent first access still yields a single instance.
    """

    _instance: ClassVar["DatabaseConnection | None"] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, settings: DatabaseSettings | None = None, *, _token: object = None):
        if _token is not _CREATE_TOKEN:
            raise RuntimeError(
                "DatabaseConnection is a singleton; use DatabaseConnection.get_instance()"
            )
        self.settings = settings or DatabaseSettings()
        self._engine: Engine = create_engine(build_url(self.settings), echo=self.settings.echo)
        logger.info(f"Database engine created for {safe_url(self._engine.url)}")

    @classmethod
    def get_instance(cls, settings: DatabaseSettings | None = None) -> "DatabaseConnection":
        """Get the shared instance, creating it on first access.

        Args:
            settings: Database settings used only when the instance is
                created; ignored afterwards

        Returns:
            The process-wide DatabaseConnection
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(settings, _token=_CREATE_TOKEN)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Dispose the engine and forget the shared instance."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance._engine.dispose()
                logger.debug("Database engine disposed")
            cls._instance = None

    def get_connection(self) -> Engine:
        """Get the wrapped engine."""
        return self._engine

    def __repr__(self) -> str:
        return f"DatabaseConnection(url={safe_url(self._engine.url)})"
