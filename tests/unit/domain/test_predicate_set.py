"""Tests for src/domain/services/predicate_set.py"""

import pytest

from domain.models.criteria import Constraint, MemberField, MemberSearchCriteria, Operator
from domain.services.predicate_set import PredicateSet


@pytest.fixture
def predicates():
    return PredicateSet()


class TestAbsentCriteria:
    def test_all_absent_yields_no_constraints(self, predicates):
        assert predicates.build(MemberSearchCriteria()) == ()

    def test_empty_strings_are_treated_as_absent(self, predicates):
        criteria = MemberSearchCriteria(username_eq="", team_name_eq="")
        assert predicates.build(criteria) == ()

    def test_zero_age_is_present(self, predicates):
        constraints = predicates.build(MemberSearchCriteria(age_goe=0))
        assert constraints == (Constraint(MemberField.AGE, Operator.GOE, 0),)


class TestPresentCriteria:
    def test_username_is_equality(self, predicates):
        constraints = predicates.build(MemberSearchCriteria(username_eq="member1"))
        assert constraints == (Constraint(MemberField.USERNAME, Operator.EQ, "member1"),)

    def test_team_name_is_equality_on_team(self, predicates):
        (constraint,) = predicates.build(MemberSearchCriteria(team_name_eq="teamB"))
        assert constraint.field is MemberField.TEAM_NAME
        assert constraint.operator is Operator.EQ
        assert constraint.requires_team is True

    def test_age_bounds(self, predicates):
        constraints = predicates.build(MemberSearchCriteria(age_goe=35, age_loe=40))
        assert constraints == (
            Constraint(MemberField.AGE, Operator.GOE, 35),
            Constraint(MemberField.AGE, Operator.LOE, 40),
        )

    def test_all_fields_in_emission_order(self, predicates):
        criteria = MemberSearchCriteria(
            username_eq="member4", team_name_eq="teamB", age_goe=35, age_loe=40
        )
        operators = [(c.field, c.operator) for c in predicates.build(criteria)]
        assert operators == [
            (MemberField.USERNAME, Operator.EQ),
            (MemberField.TEAM_NAME, Operator.EQ),
            (MemberField.AGE, Operator.GOE),
            (MemberField.AGE, Operator.LOE),
        ]

    @pytest.mark.parametrize(
        "kwargs, expected",
        [
            ({"username_eq": "a"}, 1),
            ({"username_eq": "a", "age_loe": 5}, 2),
            ({"team_name_eq": "t", "age_goe": 1, "age_loe": 9}, 3),
            ({"username_eq": "", "age_goe": 1}, 1),
        ],
    )
    def test_one_constraint_per_present_field(self, predicates, kwargs, expected):
        assert len(predicates.build(MemberSearchCriteria(**kwargs))) == expected

    def test_build_is_pure(self, predicates):
        criteria = MemberSearchCriteria(username_eq="x", age_goe=3)
        assert predicates.build(criteria) == predicates.build(criteria)


class TestOperator:
    def test_matches(self):
        assert Operator.EQ.matches("a", "a")
        assert Operator.GOE.matches(40, 35)
        assert Operator.GOE.matches(35, 35)
        assert not Operator.LOE.matches(41, 40)

    def test_missing_value_never_matches(self):
        assert not Operator.EQ.matches(None, "teamA")
