"""Integration test fixtures backed by an in-memory SQLite database."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def sync_engine():
    """Create a fresh SQLite engine with the member schema for each test."""
    from infrastructure.database.config import DatabaseSettings
    from infrastructure.database.engine import build_sync_engine, create_schema

    engine = build_sync_engine(DatabaseSettings(URL="sqlite+pysqlite:///:memory:"))
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sync_engine):
    """Provide a database session that is rolled back after the test."""
    from sqlalchemy.orm import sessionmaker

    Session = sessionmaker(bind=sync_engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def member_store(db_session):
    """A store seeded with members aged 10/20/30/40 in teams A/A/B/B."""
    from infrastructure.database.repository import SqlAlchemyMemberStore

    store = SqlAlchemyMemberStore(db_session)
    team_a = store.add_team("teamA")
    team_b = store.add_team("teamB")
    store.add_member("member1", 10, team_a)
    store.add_member("member2", 20, team_a)
    store.add_member("member3", 30, team_b)
    store.add_member("member4", 40, team_b)
    return store
