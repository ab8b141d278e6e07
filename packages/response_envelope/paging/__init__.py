"""Public paging API."""

from .metadata import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageMetadata, count_pages
from .paged import PagedResponse, create_page, create_page_clamped, empty_page

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "PageMetadata",
    "PagedResponse",
    "count_pages",
    "create_page",
    "create_page_clamped",
    "empty_page",
]
