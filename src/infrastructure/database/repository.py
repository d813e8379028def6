"""
SQLAlchemy-backed member store.

:class:`SqlAlchemyMemberStore` implements the ``MemberStore`` port used by
the query facade.  It translates constraints into SQL expressions, runs
bounded content queries and count queries, and maps ORM rows back to
domain objects.  It operates through an injected :class:`Session`;
transaction demarcation belongs to the caller.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from application.schemas.pagination import Order, SortDirection
from domain.exceptions import StorageFailureError
from domain.models.criteria import Constraint, MemberField, Operator
from domain.models.member import Member, MemberTeamDto, Team

from .models import MemberModel, TeamModel

logger = logging.getLogger(__name__)


_COLUMNS: Dict[MemberField, Any] = {
    MemberField.ID: MemberModel.id,
    MemberField.USERNAME: MemberModel.username,
    MemberField.AGE: MemberModel.age,
    MemberField.TEAM_NAME: TeamModel.name,
}


def to_clause(constraint: Constraint) -> ColumnElement[bool]:
    """Translate a single :class:`Constraint` into a SQL boolean expression."""
    column = _COLUMNS[constraint.field]
    if constraint.operator is Operator.EQ:
        return column == constraint.value
    if constraint.operator is Operator.GOE:
        return column >= constraint.value
    return column <= constraint.value


def to_order_by(ordering: Sequence[Order]) -> List[Any]:
    """Map ordering terms to columns, with member id as the final tie-breaker.

    NULLs sort first ascending and last descending on every backend.
    """
    clauses: List[Any] = []
    for order in ordering:
        column = _COLUMNS[MemberField(order.field)]
        if order.direction is SortDirection.DESC:
            clauses.append(column.desc().nulls_last())
        else:
            clauses.append(column.asc().nulls_first())
    clauses.append(MemberModel.id.asc())
    return clauses


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Member store operation %s failed: %s", operation, exc)
        raise StorageFailureError(operation, str(exc)) from exc


class SqlAlchemyMemberStore:
    """Member reads and writes over ``member`` left-joined with ``team``.

    Parameters
    ----------
    session:
        An open :class:`Session` bound to a database containing the
        ``member`` and ``team`` tables.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # -- writes ------------------------------------------------------------

    def add_team(self, name: str) -> Team:
        with _storage_errors("add_team"):
            model = TeamModel(name=name)
            self._session.add(model)
            self._session.flush()
            return Team(id=model.id, name=model.name)

    def add_member(self, username: str, age: int = 0, team: Optional[Team] = None) -> Member:
        with _storage_errors("add_member"):
            model = MemberModel(
                username=username,
                age=age,
                team_id=team.id if team is not None else None,
            )
            self._session.add(model)
            self._session.flush()
            member = Member(id=model.id, username=username, age=age)
            if team is not None:
                member.change_team(team)
            return member

    # -- reads -------------------------------------------------------------

    def fetch_members(
        self,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        offset: int,
        limit: int,
    ) -> List[Member]:
        stmt = (
            self._member_query(constraints)
            .order_by(*to_order_by(ordering))
            .offset(offset)
            .limit(limit)
        )
        with _storage_errors("fetch_members"):
            rows = self._session.execute(stmt).scalars().all()
        return _to_members(rows)

    def count_members(self, constraints: Sequence[Constraint]) -> int:
        stmt = select(func.count(MemberModel.id)).select_from(MemberModel)
        if any(c.requires_team for c in constraints):
            stmt = stmt.join(TeamModel, MemberModel.team_id == TeamModel.id)
        stmt = stmt.where(*[to_clause(c) for c in constraints])
        with _storage_errors("count_members"):
            return int(self._session.execute(stmt).scalar_one())

    def fetch_member_teams(self, constraints: Sequence[Constraint]) -> List[MemberTeamDto]:
        stmt = (
            select(
                MemberModel.id,
                MemberModel.username,
                MemberModel.age,
                TeamModel.id,
                TeamModel.name,
            )
            .select_from(MemberModel)
            .outerjoin(TeamModel, MemberModel.team_id == TeamModel.id)
            .where(*[to_clause(c) for c in constraints])
            .order_by(MemberModel.id.asc())
        )
        with _storage_errors("fetch_member_teams"):
            rows = self._session.execute(stmt).all()
        return [
            MemberTeamDto(
                member_id=member_id,
                username=username,
                age=age,
                team_id=team_id,
                team_name=team_name,
            )
            for member_id, username, age, team_id, team_name in rows
        ]

    def list_members(self) -> List[Member]:
        stmt = select(MemberModel).order_by(MemberModel.id.asc())
        with _storage_errors("list_members"):
            rows = self._session.execute(stmt).scalars().all()
        return _to_members(rows)

    def find_by_username(self, username: str) -> List[Member]:
        stmt = (
            select(MemberModel)
            .where(MemberModel.username == username)
            .order_by(MemberModel.id.asc())
        )
        with _storage_errors("find_by_username"):
            rows = self._session.execute(stmt).scalars().all()
        return _to_members(rows)

    @staticmethod
    def _member_query(constraints: Sequence[Constraint]) -> Select:
        return (
            select(MemberModel)
            .outerjoin(TeamModel, MemberModel.team_id == TeamModel.id)
            .where(*[to_clause(c) for c in constraints])
        )


def _to_members(rows: Sequence[MemberModel]) -> List[Member]:
    teams: Dict[int, Team] = {}
    members: List[Member] = []
    for row in rows:
        member = Member(id=row.id, username=row.username, age=row.age)
        if row.team is not None:
            team = teams.setdefault(row.team.id, Team(id=row.team.id, name=row.team.name))
            member.change_team(team)
        members.append(member)
    return members
