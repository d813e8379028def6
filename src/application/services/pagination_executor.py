"""Page execution with optional count-query avoidance.

``PaginationExecutor`` runs the bounded content fetch first and only then
decides whether a separate count round-trip is needed.  A page that is not
full proves it is the last one, so its total can be inferred instead of
queried.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Sequence

from domain.exceptions import InconsistentResultError
from domain.models.criteria import Constraint

from application.schemas.pagination import Order, PageRequest, PageResult, validate_bounds

logger = logging.getLogger(__name__)

ContentFetcher = Callable[[Sequence[Constraint], Sequence[Order], int, int], Sequence[Any]]
CountFetcher = Callable[[Sequence[Constraint]], int]


class CountStrategy(str, enum.Enum):
    NAIVE = "naive"
    OPTIMIZED = "optimized"


class PaginationExecutor:
    """Executes page queries against injected fetch functions."""

    def run(
        self,
        strategy: CountStrategy,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        page_request: PageRequest,
        content_fetcher: ContentFetcher,
        count_fetcher: CountFetcher,
    ) -> PageResult:
        if strategy is CountStrategy.NAIVE:
            return self.execute_naive(
                constraints, ordering, page_request, content_fetcher, count_fetcher
            )
        return self.execute(constraints, ordering, page_request, content_fetcher, count_fetcher)

    def execute(
        self,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        page_request: PageRequest,
        content_fetcher: ContentFetcher,
        count_fetcher: CountFetcher,
    ) -> PageResult:
        """Fetch a page, running *count_fetcher* only when the page is full.

        A full last page still triggers a count query; the page size alone
        cannot tell it apart from a page with more records behind it.
        """
        offset, limit = page_request.offset, page_request.limit
        content = self._fetch_content(constraints, ordering, page_request, content_fetcher)

        if offset == 0 and len(content) < limit:
            total = len(content)
        elif len(content) < limit:
            total = offset + len(content)
        else:
            return self._counted(content, page_request, constraints, count_fetcher)

        logger.debug(
            "Count query skipped: offset=%d limit=%d content=%d total=%d",
            offset, limit, len(content), total,
        )
        return PageResult(content=content, offset=offset, limit=limit, total=total, counted=False)

    def execute_naive(
        self,
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        page_request: PageRequest,
        content_fetcher: ContentFetcher,
        count_fetcher: CountFetcher,
    ) -> PageResult:
        """Fetch a page and always run *count_fetcher* afterwards."""
        content = self._fetch_content(constraints, ordering, page_request, content_fetcher)
        return self._counted(content, page_request, constraints, count_fetcher)

    # -- internal helpers --------------------------------------------------

    @staticmethod
    def _fetch_content(
        constraints: Sequence[Constraint],
        ordering: Sequence[Order],
        page_request: PageRequest,
        content_fetcher: ContentFetcher,
    ) -> list:
        validate_bounds(page_request.offset, page_request.limit)
        content = list(
            content_fetcher(constraints, ordering, page_request.offset, page_request.limit)
        )
        if len(content) > page_request.limit:
            raise InconsistentResultError(limit=page_request.limit, actual=len(content))
        return content

    @staticmethod
    def _counted(
        content: list,
        page_request: PageRequest,
        constraints: Sequence[Constraint],
        count_fetcher: CountFetcher,
    ) -> PageResult:
        total = int(count_fetcher(constraints))
        logger.debug(
            "Count query executed: offset=%d limit=%d content=%d total=%d",
            page_request.offset, page_request.limit, len(content), total,
        )
        return PageResult(
            content=content,
            offset=page_request.offset,
            limit=page_request.limit,
            total=total,
            counted=True,
        )
