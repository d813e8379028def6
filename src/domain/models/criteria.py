"""Search criteria and the constraints composed from them."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class MemberSearchCriteria:
    """Optional member filters supplied by a caller.

    Every field is independently optional.  ``None`` (and, for the text
    fields, the empty string) means "do not filter on this field".
    """

    username_eq: Optional[str] = None
    team_name_eq: Optional[str] = None
    age_goe: Optional[int] = None
    age_loe: Optional[int] = None


class Operator(str, enum.Enum):
    EQ = "eq"
    GOE = "goe"
    LOE = "loe"

    def matches(self, left: Any, right: Any) -> bool:
        """Evaluate ``left <op> right``; a missing *left* never matches."""
        if left is None:
            return False
        return _OPERATOR_FUNCS[self](left, right)


_OPERATOR_FUNCS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQ: operator.eq,
    Operator.GOE: operator.ge,
    Operator.LOE: operator.le,
}


class MemberField(str, enum.Enum):
    ID = "id"
    USERNAME = "username"
    AGE = "age"
    TEAM_NAME = "team_name"


SORTABLE_FIELDS: frozenset[str] = frozenset(f.value for f in MemberField)


@dataclass(frozen=True)
class Constraint:
    """A single ``field <operator> value`` clause."""

    field: MemberField
    operator: Operator
    value: Any

    @property
    def requires_team(self) -> bool:
        return self.field is MemberField.TEAM_NAME

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.operator.matches(getattr(candidate, self.field.value), self.value)
