"""
SQLAlchemy 2.0+ ORM models for the member query service.

Schema layout
-------------
* ``team``    -- one row per team
* ``member``  -- one row per member, optionally linked to a team
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    """Shared declarative base for every ORM model."""
    pass


# ---------------------------------------------------------------------------
# TeamModel
# ---------------------------------------------------------------------------

class TeamModel(Base):
    __tablename__ = "team"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members: Mapped[List["MemberModel"]] = relationship(
        back_populates="team",
    )

    def __repr__(self) -> str:
        return f"<TeamModel id={self.id} name={self.name!r}>"


# ---------------------------------------------------------------------------
# MemberModel
# ---------------------------------------------------------------------------

class MemberModel(Base):
    """A team member.  ``team_id`` is nullable; members may be unassigned."""

    __tablename__ = "member"
    __table_args__ = (
        Index("ix_member_username", "username"),
        Index("ix_member_age", "age"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    team_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("team.id"),
        nullable=True,
    )

    team: Mapped[Optional[TeamModel]] = relationship(
        back_populates="members",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<MemberModel id={self.id} username={self.username!r} age={self.age}>"
