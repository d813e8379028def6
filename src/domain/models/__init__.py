from domain.models.criteria import (
    SORTABLE_FIELDS,
    Constraint,
    MemberField,
    MemberSearchCriteria,
    Operator,
)
from domain.models.member import Member, MemberTeamDto, Team

__all__ = [
    "SORTABLE_FIELDS",
    "Constraint",
    "Member",
    "MemberField",
    "MemberSearchCriteria",
    "MemberTeamDto",
    "Operator",
    "Team",
]
