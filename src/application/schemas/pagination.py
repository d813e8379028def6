"""Pagination value objects for offset/limit page queries.

Provides an immutable ``PageRequest`` (offset, limit and ordering) and a
generic ``PageResult`` container whose ``total`` is either counted by the
store or inferred from a short page.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

from domain.exceptions import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    """A single ordering term: field name + direction."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @staticmethod
    def asc(field_name: str) -> Order:
        return Order(field_name, SortDirection.ASC)

    @staticmethod
    def desc(field_name: str) -> Order:
        return Order(field_name, SortDirection.DESC)


def validate_bounds(offset: int, limit: int) -> None:
    """Raise :class:`InvalidArgumentError` for a negative offset or a non-positive limit."""
    if offset < 0:
        raise InvalidArgumentError("offset", f"must be >= 0, got {offset}")
    if limit <= 0:
        raise InvalidArgumentError("limit", f"must be > 0, got {limit}")


@dataclass(frozen=True)
class PageRequest:
    """Immutable page request parameters.

    ``offset`` is zero-based.  Unlike a clamped request, out-of-range
    values are rejected at construction time.
    """

    offset: int = 0
    limit: int = 20
    ordering: tuple[Order, ...] = ()

    def __post_init__(self) -> None:
        validate_bounds(self.offset, self.limit)
        # frozen=True requires object.__setattr__ for normalisation
        object.__setattr__(self, "ordering", tuple(self.ordering))

    @classmethod
    def of(cls, page: int, size: int, *ordering: Order) -> PageRequest:
        """Build a request for the zero-based *page* of *size* records."""
        if page < 0:
            raise InvalidArgumentError("page", f"must be >= 0, got {page}")
        validate_bounds(0, size)
        return cls(offset=page * size, limit=size, ordering=ordering)

    def next(self) -> PageRequest:
        return PageRequest(offset=self.offset + self.limit, limit=self.limit, ordering=self.ordering)


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of content plus its resolved total.

    ``counted`` tells whether ``total`` came from a count query or was
    inferred as ``offset + len(content)`` from a page that was not full.
    """

    content: List[T] = field(default_factory=list)
    offset: int = 0
    limit: int = 20
    total: int = 0
    counted: bool = False

    @property
    def page(self) -> int:
        """Zero-based index of this page."""
        return self.offset // self.limit

    @property
    def pages(self) -> int:
        """Total number of pages; zero when nothing matched."""
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.content) < self.total

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, func: Callable[[T], U]) -> PageResult[U]:
        """Transform the content, keeping the page metadata."""
        return PageResult(
            content=[func(item) for item in self.content],
            offset=self.offset,
            limit=self.limit,
            total=self.total,
            counted=self.counted,
        )
