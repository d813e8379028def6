"""Tests for src/infrastructure/adapters.py"""

from application.schemas.pagination import Order
from domain.models.criteria import Constraint, MemberField, Operator
from infrastructure.adapters import InMemoryMemberStore


class TestInMemoryMemberStore:

    def test_ids_are_assigned(self, memory_store):
        ids = [m.id for m in memory_store.list_members()]
        assert len(set(ids)) == 4
        assert ids == sorted(ids)

    def test_members_share_team_instance(self, memory_store):
        m1, m2, _, _ = memory_store.list_members()
        assert m1.team is m2.team
        assert [m.username for m in m1.team.members] == ["member1", "member2"]

    def test_fetch_honours_offset_and_limit(self, memory_store):
        page = memory_store.fetch_members((), (Order.asc("username"),), 1, 2)
        assert [m.username for m in page] == ["member2", "member3"]

    def test_fetch_descending(self, memory_store):
        page = memory_store.fetch_members((), (Order.desc("username"),), 0, 10)
        assert [m.username for m in page] == ["member4", "member3", "member2", "member1"]

    def test_count_ignores_paging(self, memory_store):
        constraints = (Constraint(MemberField.AGE, Operator.GOE, 20),)
        assert memory_store.count_members(constraints) == 3

    def test_team_constraint_excludes_unassigned(self):
        store = InMemoryMemberStore()
        team = store.add_team("teamA")
        store.add_member("in", 1, team)
        store.add_member("out", 2)
        constraints = (Constraint(MemberField.TEAM_NAME, Operator.EQ, "teamA"),)
        assert [m.username for m in store.fetch_members(constraints, (), 0, 10)] == ["in"]

    def test_member_teams_projection(self, memory_store):
        constraints = (Constraint(MemberField.USERNAME, Operator.EQ, "member3"),)
        (dto,) = memory_store.fetch_member_teams(constraints)
        assert dto.team_name == "teamB"
        assert dto.age == 30

    def test_unassigned_members_first_ascending_last_descending(self, memory_store):
        memory_store.add_member("solo", 50)
        ascending = memory_store.fetch_members((), (Order.asc("team_name"),), 0, 10)
        descending = memory_store.fetch_members((), (Order.desc("team_name"),), 0, 10)
        assert ascending[0].username == "solo"
        assert descending[-1].username == "solo"
