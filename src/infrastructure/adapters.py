"""In-memory adapter for the member store port.

Evaluates constraints in Python against domain objects.  Used for wiring
without a database and as the store behind the unit tests.
"""

from __future__ import annotations

import itertools
from typing import Any, List, Optional, Sequence

from application.schemas.pagination import Order, SortDirection
from domain.models.criteria import Constraint
from domain.models.member import Member, MemberTeamDto, Team


def _sort_key(value: Any) -> tuple:
    # None sorts first ascending and last descending, like to_order_by.
    return (value is not None, value)


class InMemoryMemberStore:
    """Synchronous in-memory member store."""

    def __init__(self) -> None:
        self._members: list[Member] = []
        self._teams: list[Team] = []
        self._ids = itertools.count(1)

    # -- writes ------------------------------------------------------------

    def add_team(self, name: str) -> Team:
        team = Team(id=next(self._ids), name=name)
        self._teams.append(team)
        return team

    def add_member(self, username: str, age: int = 0, team: Optional[Team] = None) -> Member:
        member = Member(id=next(self._ids), username=username, age=age)
        if team is not None:
            member.change_team(team)
        self._members.append(member)
        return member

    # -- reads -------------------------------------------------------------

    def fetch_members(
        self,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        offset: int,
        limit: int,
    ) -> List[Member]:
        matched = self._matching(constraints)
        return _ordered(matched, ordering)[offset : offset + limit]

    def count_members(self, constraints: Sequence[Constraint]) -> int:
        return len(self._matching(constraints))

    def fetch_member_teams(self, constraints: Sequence[Constraint]) -> List[MemberTeamDto]:
        return [MemberTeamDto.from_member(m) for m in _ordered(self._matching(constraints), ())]

    def list_members(self) -> List[Member]:
        return _ordered(self._members, ())

    def find_by_username(self, username: str) -> List[Member]:
        return [m for m in _ordered(self._members, ()) if m.username == username]

    def _matching(self, constraints: Sequence[Constraint]) -> List[Member]:
        return [m for m in self._members if all(c.is_satisfied_by(m) for c in constraints)]


def _ordered(members: Sequence[Member], ordering: Sequence[Order]) -> List[Member]:
    # Stable sorts applied from the least significant key; id breaks ties.
    result = sorted(members, key=lambda m: _sort_key(m.id))
    for order in reversed(ordering):
        result.sort(
            key=lambda m, name=order.field: _sort_key(getattr(m, name)),
            reverse=order.direction is SortDirection.DESC,
        )
    return result
