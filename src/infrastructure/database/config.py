"""
Database configuration for the member query service.

Centralises connection settings, pool tuning parameters, and the URL
builder used by :mod:`infrastructure.database.engine`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


@dataclass(frozen=True)
class DatabaseSettings:
    """Immutable database connection and pool configuration.

    When ``URL`` is set it is used verbatim; otherwise a PostgreSQL DSN is
    assembled from the individual ``POSTGRES_*`` fields.
    """

    URL: Optional[str] = None

    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "member_query"

    # Connection-pool tuning (ignored for SQLite)
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30

    ECHO: bool = False
    SSL_MODE: Optional[str] = None


def get_database_url(settings: Optional[DatabaseSettings] = None) -> str:
    """Build a synchronous SQLAlchemy database URL.

    Parameters
    ----------
    settings:
        An explicit :class:`DatabaseSettings` instance.  When *None* the
        default settings are used.

    Returns
    -------
    str
        A fully-qualified SQLAlchemy database URL.
    """
    s = settings or DatabaseSettings()
    if s.URL:
        return s.URL
    url = (
        f"postgresql+psycopg2://{s.POSTGRES_USER}:{s.POSTGRES_PASSWORD}"
        f"@{s.POSTGRES_HOST}:{s.POSTGRES_PORT}/{s.POSTGRES_DB}"
    )
    if s.SSL_MODE:
        url += f"?sslmode={s.SSL_MODE}"
    return url


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


@lru_cache(maxsize=1)
def get_default_settings() -> DatabaseSettings:
    """Return a cached default :class:`DatabaseSettings` singleton."""
    return DatabaseSettings()
