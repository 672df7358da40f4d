"""
Pagination types for queries.

Provides a zero-based page request and a transport-neutral page result.

Example:
    def find_all_series(self, page: int, page_size: int) -> Page[SerieRecord]:
        pagination = Pagination(page=page, page_size=page_size)
        rows, total = ...  # query using pagination.offset / pagination.limit
        return Page.from_query_result(rows, page, page_size, total)

    page.map(mapper.to_domain)  # same metadata, mapped content
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page index (0-indexed)
        page_size: Number of items per page
    """

    page: int = 0
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page must not be negative")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return self.page * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


def count_pages(total_elements: int, page_size: int) -> int:
    """Number of pages needed for ``total_elements`` items, 0 when there is nothing to page."""
    if total_elements <= 0 or page_size <= 0:
        return 0
    return (total_elements + page_size - 1) // page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    A bounded slice of a larger result set plus its position within the whole.

    Attributes:
        content: Items of the current page, in order
        page: Current page index (0-indexed)
        page_size: Requested number of items per page
        total_elements: Number of items across all pages
        total_pages: Number of pages (0 when there are no items)
        last: Whether this is the last page (always True when there are no items)
    """

    content: tuple[T, ...]
    page: int
    page_size: int
    total_elements: int
    total_pages: int
    last: bool

    @classmethod
    def from_query_result(
        cls,
        content: Sequence[T],
        page: int,
        page_size: int,
        total_elements: int,
    ) -> "Page[T]":
        """Adapt a raw paged query result, computing page count and last-page flag."""
        total_pages = count_pages(total_elements, page_size)
        last = total_elements == 0 or page >= total_pages - 1
        return cls(
            content=tuple(content),
            page=page,
            page_size=page_size,
            total_elements=total_elements,
            total_pages=total_pages,
            last=last,
        )

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Transform every item, keeping all page metadata unchanged."""
        return Page(
            content=tuple(fn(item) for item in self.content),
            page=self.page,
            page_size=self.page_size,
            total_elements=self.total_elements,
            total_pages=self.total_pages,
            last=self.last,
        )

    def __len__(self) -> int:
        return len(self.content)
