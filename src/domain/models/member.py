from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Team:
    id: Optional[int] = None
    name: str = ""
    members: List["Member"] = field(default_factory=list, repr=False, compare=False)


@dataclass
class Member:
    id: Optional[int] = None
    username: str = ""
    age: int = 0
    team: Optional[Team] = None

    def change_team(self, team: Team) -> None:
        """Move the member to *team*, keeping both sides of the relation in sync."""
        if self.team is not None:
            self.team.members[:] = [m for m in self.team.members if m is not self]
        self.team = team
        team.members.append(self)

    @property
    def team_name(self) -> Optional[str]:
        return self.team.name if self.team is not None else None


@dataclass(frozen=True)
class MemberTeamDto:
    """Flattened member + team row returned by non-paginated searches."""

    member_id: Optional[int]
    username: str
    age: int
    team_id: Optional[int] = None
    team_name: Optional[str] = None

    @classmethod
    def from_member(cls, member: Member) -> MemberTeamDto:
        return cls(
            member_id=member.id,
            username=member.username,
            age=member.age,
            team_id=member.team.id if member.team is not None else None,
            team_name=member.team_name,
        )
