"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from infrastructure.database.config import DatabaseSettings


class AppSettings(BaseSettings):
    """Central configuration for the member query service."""

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    # Database
    database_url: str = "sqlite+pysqlite:///:memory:"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False

    # Logging
    log_level: str = "INFO"

    def database_settings(self) -> DatabaseSettings:
        return DatabaseSettings(
            URL=self.database_url,
            POOL_SIZE=self.db_pool_size,
            MAX_OVERFLOW=self.db_max_overflow,
            ECHO=self.db_echo,
        )


def get_settings() -> AppSettings:
    """Return the application settings singleton."""
    return AppSettings()
