from __future__ import annotations

from typing import List, Optional

from domain.models.criteria import Constraint, MemberField, MemberSearchCriteria, Operator


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value != ""


class PredicateSet:
    """Turns a :class:`MemberSearchCriteria` into the constraints it implies.

    Only present criteria fields produce a constraint; the result is the
    conjunction of everything returned.  An empty tuple matches every
    member.
    """

    def build(self, criteria: MemberSearchCriteria) -> tuple[Constraint, ...]:
        constraints: List[Constraint] = []

        if _has_text(criteria.username_eq):
            constraints.append(Constraint(MemberField.USERNAME, Operator.EQ, criteria.username_eq))
        if _has_text(criteria.team_name_eq):
            constraints.append(Constraint(MemberField.TEAM_NAME, Operator.EQ, criteria.team_name_eq))
        if criteria.age_goe is not None:
            constraints.append(Constraint(MemberField.AGE, Operator.GOE, criteria.age_goe))
        if criteria.age_loe is not None:
            constraints.append(Constraint(MemberField.AGE, Operator.LOE, criteria.age_loe))

        return tuple(constraints)
