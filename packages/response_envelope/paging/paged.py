"""Paged envelopes carrying one page of items plus its pagination metadata."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict

from packages.response_envelope.errors import InvalidArgumentError, require_not_none
from packages.response_envelope.logging import fields, get_logger, log_context

from .metadata import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageMetadata, count_pages


T = TypeVar("T")

_LOGGER = get_logger(__name__)


class PagedResponse(BaseModel, Generic[T]):
    """Items for one page, in order, with the page's position in the result set."""

    model_config = ConfigDict(frozen=True)

    items: tuple[T, ...] = ()
    page_metadata: PageMetadata = PageMetadata.EMPTY


def create_page(
    items: Iterable[T],
    page_number: int,
    page_size: int,
    total_count: int,
) -> PagedResponse[T]:
    """Build a page from ``items``, consuming the iterable exactly once.

    Numeric validation is left to ``PageMetadata``.
    """
    require_not_none(items, "items")
    return PagedResponse(
        items=tuple(items),
        page_metadata=PageMetadata.create(page_number, page_size, total_count),
    )


def create_page_clamped(
    items: Iterable[T],
    page_number: int,
    page_size: int,
    total_count: int,
) -> PagedResponse[T]:
    """Build a page whose number is clamped into the existing page range.

    An empty result set always resolves to page 1.
    """
    require_not_none(items, "items")
    if page_size <= 0:
        raise InvalidArgumentError(
            message="Page size must be greater than zero",
            argument="page_size",
        )
    if total_count < 0:
        raise InvalidArgumentError(
            message="Total count cannot be negative",
            argument="total_count",
        )

    total_pages = count_pages(total_count, page_size)
    if total_pages == 0:
        clamped = 1
    else:
        clamped = min(max(page_number, 1), total_pages)

    if clamped != page_number:
        with log_context(
            {
                fields.EVENT: fields.PAGE_CLAMPED_EVENT,
                fields.REQUESTED_PAGE_NUMBER: page_number,
                fields.PAGE_NUMBER: clamped,
                fields.TOTAL_PAGES: total_pages,
            }
        ):
            _LOGGER.debug("Clamped requested page number")

    return create_page(items, clamped, page_size, total_count)


def empty_page(
    page_number: int = DEFAULT_PAGE_NUMBER,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PagedResponse[T]:
    """Build a page with no items and a total count of zero."""
    return create_page((), page_number, page_size, 0)
