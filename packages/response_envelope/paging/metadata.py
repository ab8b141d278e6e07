"""Pagination metadata and page arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from packages.response_envelope.errors import InvalidArgumentError

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


def count_pages(total_count: int, page_size: int) -> int:
    """Return ``ceil(total_count / page_size)`` using integer arithmetic."""
    return (total_count + page_size - 1) // page_size


@dataclass(frozen=True)
class PageMetadata:
    """Position of one page within a result set.

    ``page_number`` is 1-based. ``total_pages`` is 0 for an empty result set,
    so an empty first page reports neither a previous nor a next page.
    """

    page_number: int
    page_size: int
    total_count: int

    EMPTY: ClassVar[PageMetadata]

    def __post_init__(self) -> None:
        for argument in ("page_number", "page_size", "total_count"):
            value = getattr(self, argument)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    message="Value must be an integer",
                    argument=argument,
                )
        if self.page_number < 1:
            raise InvalidArgumentError(
                message="Page number must be at least 1",
                argument="page_number",
            )
        if self.page_size < 1:
            raise InvalidArgumentError(
                message="Page size must be at least 1",
                argument="page_size",
            )
        if self.total_count < 0:
            raise InvalidArgumentError(
                message="Total count cannot be negative",
                argument="total_count",
            )

    @classmethod
    def create(cls, page_number: int, page_size: int, total_count: int) -> PageMetadata:
        """Build validated metadata; raises ``InvalidArgumentError`` when out of range."""
        return cls(page_number=page_number, page_size=page_size, total_count=total_count)

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_count, self.page_size)

    @property
    def current_page_size(self) -> int:
        """Number of items that actually fall on this page."""
        remaining = self.total_count - (self.page_number - 1) * self.page_size
        return min(self.page_size, max(0, remaining))

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages


PageMetadata.EMPTY = PageMetadata.create(
    page_number=DEFAULT_PAGE_NUMBER,
    page_size=DEFAULT_PAGE_SIZE,
    total_count=0,
)
