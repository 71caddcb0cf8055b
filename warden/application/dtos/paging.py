"""Paging DTOs for organization browsing.

BrowseOrganizations describes which organizations to return and which
page of them; PagedResult carries one page plus the totals needed to
request the next one.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar
from uuid import UUID

from warden.domain.errors.kinds import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class BrowseOrganizations:
    """Filter and pagination for browsing organizations.

    All filters are optional and combined with AND.

    Attributes:
        user_id: Only organizations this user is a member of.
        owner_id: Only organizations owned by this user.
        name: Only organizations whose name contains this fragment
            (case-insensitive).
        page: 1-based page number.
        results_per_page: Maximum items per page. None means the
            configured default, applied by with_page_size before the
            query reaches a repository.
    """

    user_id: UUID | None = None
    owner_id: UUID | None = None
    name: str | None = None
    page: int = 1
    results_per_page: int | None = None

    def __post_init__(self) -> None:
        """Validate pagination values."""
        if self.page < 1:
            raise InvalidArgumentError(f"page must be at least 1, got {self.page}")
        if self.results_per_page is not None and self.results_per_page < 1:
            raise InvalidArgumentError(
                f"results_per_page must be at least 1, got {self.results_per_page}"
            )

    def with_page_size(self, default: int, maximum: int) -> BrowseOrganizations:
        """Return a copy with results_per_page defaulted and capped at maximum."""
        return replace(
            self, results_per_page=min(self.results_per_page or default, maximum)
        )

    @property
    def page_size(self) -> int:
        """Page size of a resolved query.

        Raises:
            ValueError: If results_per_page was never resolved.
        """
        if self.results_per_page is None:
            raise ValueError("results_per_page is unset; call with_page_size first")
        return self.results_per_page

    @property
    def offset(self) -> int:
        """Number of items skipped before this page."""
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results.

    Attributes:
        items: Items on this page.
        current_page: 1-based number of this page (0 for the empty result).
        results_per_page: Page size used for the query.
        total_pages: Number of pages available.
        total_results: Number of items across all pages.
    """

    items: tuple[T, ...] = field(default_factory=tuple)
    current_page: int = 0
    results_per_page: int = 0
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def empty(cls) -> PagedResult[T]:
        """Return a result with no items and no pages."""
        return cls()

    @classmethod
    def create(
        cls,
        items: Sequence[T],
        current_page: int,
        results_per_page: int,
        total_results: int,
    ) -> PagedResult[T]:
        """Build a page, deriving the page count from the totals."""
        return cls(
            items=tuple(items),
            current_page=current_page,
            results_per_page=results_per_page,
            total_pages=math.ceil(total_results / results_per_page)
            if results_per_page
            else 0,
            total_results=total_results,
        )

    @property
    def is_empty(self) -> bool:
        """Whether the page holds no items."""
        return not self.items

    @property
    def has_more(self) -> bool:
        """Whether pages exist beyond this one."""
        return self.current_page < self.total_pages

    def map(self, func: Callable[[T], U]) -> PagedResult[U]:
        """Return the same page with every item converted by func."""
        return PagedResult(
            items=tuple(func(item) for item in self.items),
            current_page=self.current_page,
            results_per_page=self.results_per_page,
            total_pages=self.total_pages,
            total_results=self.total_results,
        )
