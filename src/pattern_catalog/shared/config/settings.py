"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database settings for the shared connection handle."""
    model_config = SettingsConfigDict(env_prefix="DB_")

    url: str = "sqlite:///:memory:"
    username: str | None = None
    password: SecretStr | None = None
    echo: bool = False


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CatalogSettings(BaseSettings):
    """Sample data fed to the pattern demos."""
    model_config = SettingsConfigDict(env_prefix="CATALOG_")

    default_item_id: int = 123
    default_amount: int = 250
    notification_message: str = "Hello via sms!"
    event_payload: str = "New User Registered"
    legacy_payment_amount: int = 100


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    app_name: str = "Pattern-Catalog"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
