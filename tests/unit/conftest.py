"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List, Sequence

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.member_query_repository import QueryRepository
from infrastructure.adapters import InMemoryMemberStore


class SpyStore:
    """Wraps a member store and records every fetch call in order."""

    def __init__(self, store: Any) -> None:
        self._store = store
        self.calls: List[str] = []
        self.content_calls: List[tuple] = []
        self.count_calls: List[tuple] = []

    def fetch_members(self, constraints, ordering, offset, limit):
        self.calls.append("content")
        self.content_calls.append((tuple(constraints), tuple(ordering), offset, limit))
        return self._store.fetch_members(constraints, ordering, offset, limit)

    def count_members(self, constraints):
        self.calls.append("count")
        self.count_calls.append(tuple(constraints))
        return self._store.count_members(constraints)

    def fetch_member_teams(self, constraints):
        self.calls.append("join")
        return self._store.fetch_member_teams(constraints)

    def list_members(self):
        return self._store.list_members()

    def find_by_username(self, username):
        return self._store.find_by_username(username)


class StubFetchers:
    """Fetch functions returning canned content and a fixed total."""

    def __init__(self, content: Sequence[Any], total: int = 0) -> None:
        self.content = list(content)
        self.total = total
        self.calls: List[str] = []

    def content_fetcher(self, constraints, ordering, offset, limit):
        self.calls.append("content")
        return list(self.content)

    def count_fetcher(self, constraints):
        self.calls.append("count")
        return self.total

    @property
    def count_calls(self) -> int:
        return self.calls.count("count")


def seed_members(store: Any) -> None:
    """Four members: ages 10/20/30/40, teams A/A/B/B."""
    team_a = store.add_team("teamA")
    team_b = store.add_team("teamB")
    store.add_member("member1", 10, team_a)
    store.add_member("member2", 20, team_a)
    store.add_member("member3", 30, team_b)
    store.add_member("member4", 40, team_b)


@pytest.fixture
def memory_store() -> InMemoryMemberStore:
    store = InMemoryMemberStore()
    seed_members(store)
    return store


@pytest.fixture
def spy_store(memory_store) -> SpyStore:
    return SpyStore(memory_store)


@pytest.fixture
def repo(spy_store) -> QueryRepository:
    return QueryRepository(spy_store)


@pytest.fixture
def make_stub():
    """Factory for :class:`StubFetchers`."""
    return StubFetchers
