"""
SQLAlchemy engine setup with connection pooling.

Provides a synchronous engine factory, schema creation, and the session
factory used by the service container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import (
    DatabaseSettings,
    get_database_url,
    get_default_settings,
    is_sqlite_url,
)
from .models import Base

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# ---------------------------------------------------------------------------
# Engine factories
# ---------------------------------------------------------------------------


def build_sync_engine(settings: DatabaseSettings | None = None) -> Engine:
    """Create a synchronous SQLAlchemy :class:`Engine`.

    SQLite URLs share a single connection through :class:`StaticPool` so
    an in-memory database survives across sessions; every other backend
    gets a :class:`QueuePool`.

    Parameters
    ----------
    settings:
        Database configuration.  Falls back to defaults when *None*.
    """
    s = settings or get_default_settings()
    url = get_database_url(s)
    if is_sqlite_url(url):
        return sa_create_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=s.ECHO,
        )
    return sa_create_engine(
        url,
        poolclass=QueuePool,
        pool_size=s.POOL_SIZE,
        max_overflow=s.MAX_OVERFLOW,
        pool_timeout=s.POOL_TIMEOUT,
        pool_pre_ping=True,
        echo=s.ECHO,
    )


def create_schema(engine: Engine) -> None:
    """Create the ``team`` and ``member`` tables if they do not exist."""
    Base.metadata.create_all(engine)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)
