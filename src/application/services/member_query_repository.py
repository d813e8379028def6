"""Member query facade.

``QueryRepository`` sits between callers and a member store.  It turns
search criteria into constraints, validates the requested ordering, and
delegates page execution to :class:`PaginationExecutor` with the chosen
count strategy.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from domain.exceptions import InvalidArgumentError
from domain.models.criteria import SORTABLE_FIELDS, Constraint, MemberSearchCriteria
from domain.models.member import Member, MemberTeamDto
from domain.services.predicate_set import PredicateSet

from application.schemas.pagination import Order, PageRequest, PageResult
from application.services.pagination_executor import CountStrategy, PaginationExecutor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Store port (dependency-inversion)
# ---------------------------------------------------------------------------

class MemberStore(Protocol):
    """Port: read access to members and their teams."""

    def fetch_members(
        self,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        offset: int,
        limit: int,
    ) -> List[Member]: ...

    def count_members(self, constraints: Sequence[Constraint]) -> int: ...

    def fetch_member_teams(self, constraints: Sequence[Constraint]) -> List[MemberTeamDto]: ...

    def list_members(self) -> List[Member]: ...

    def find_by_username(self, username: str) -> List[Member]: ...


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class QueryRepository:
    """Search and page through members using an injected :class:`MemberStore`."""

    def __init__(
        self,
        store: MemberStore,
        *,
        predicate_set: Optional[PredicateSet] = None,
        executor: Optional[PaginationExecutor] = None,
    ) -> None:
        self._store = store
        self._predicates = predicate_set or PredicateSet()
        self._executor = executor or PaginationExecutor()

    def search(self, criteria: MemberSearchCriteria) -> List[MemberTeamDto]:
        """Return every member matching *criteria* joined with its team name."""
        constraints = self._predicates.build(criteria)
        return self._store.fetch_member_teams(constraints)

    def search_page(
        self,
        criteria: MemberSearchCriteria,
        page_request: PageRequest,
        strategy: CountStrategy = CountStrategy.OPTIMIZED,
    ) -> PageResult[Member]:
        constraints = self._predicates.build(criteria)
        _check_ordering(page_request.ordering)
        logger.debug(
            "Paged member search: %d constraint(s), strategy=%s",
            len(constraints), strategy.value,
        )
        return self._executor.run(
            strategy,
            constraints,
            page_request.ordering,
            page_request,
            self._store.fetch_members,
            self._store.count_members,
        )

    def search_page_naive(
        self, criteria: MemberSearchCriteria, page_request: PageRequest
    ) -> PageResult[Member]:
        return self.search_page(criteria, page_request, CountStrategy.NAIVE)

    def search_page_optimized(
        self, criteria: MemberSearchCriteria, page_request: PageRequest
    ) -> PageResult[Member]:
        return self.search_page(criteria, page_request, CountStrategy.OPTIMIZED)

    def find_all(self) -> List[Member]:
        return self._store.list_members()

    def find_by_username(self, username: str) -> List[Member]:
        return self._store.find_by_username(username)


def _check_ordering(ordering: Sequence[Order]) -> None:
    for order in ordering:
        if order.field not in SORTABLE_FIELDS:
            raise InvalidArgumentError(
                "ordering", f"unknown sort field '{order.field}'"
            )
