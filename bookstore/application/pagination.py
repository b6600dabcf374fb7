"""Generic pagination over ordered sources.

The engine counts matching items first, then fetches one window of
``page_size`` items starting at ``(page - 1) * page_size``. It refuses to
page a source without an explicit ordering, because unordered windows are
not stable between calls.

Policy:
    - page < 1, page_size < 1 and unordered sources are ValidationErrors
    - a page past the end (or an empty source) is an empty PagedList, not
      an error; item_count and total_pages still describe the full set,
      and the source is not fetched for it
    - clamping a user-supplied page to 1 is the query handler's job

Usage:
    result = await paginate(repo.page_views(), page=2, page_size=10)
    match result:
        case Success(value=paged):
            paged.items, paged.total_pages
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from bookstore.core.enums import ErrorCode
from bookstore.core.errors import ValidationError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.protocols.page_source_protocol import PageSource

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PagedList(Generic[T]):
    """One immutable page of an ordered result set.

    Attributes:
        items: Items on this page (at most page_size).
        selected_page: 1-based page number.
        total_pages: ceil(item_count / page_size).
        page_size: Requested window size.
        item_count: Total number of matching items across all pages.
    """

    items: tuple[T, ...]
    selected_page: int
    total_pages: int
    page_size: int
    item_count: int

    @property
    def has_next(self) -> bool:
        return self.selected_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.selected_page > 1


async def paginate(
    source: PageSource[T],
    page: int,
    page_size: int,
) -> Result[PagedList[T], ValidationError]:
    """Produce one page from an ordered source.

    Args:
        source: Ordered, countable source.
        page: 1-based page number.
        page_size: Maximum items per page.

    Returns:
        Success(PagedList) or Failure(ValidationError) when a precondition
        does not hold.
    """
    if page < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PAGE_NUMBER,
                message="Page number must be at least 1",
                field="page",
            )
        )
    if page_size < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PAGE_SIZE,
                message="Page size must be at least 1",
                field="page_size",
            )
        )
    if not source.is_ordered:
        return Failure(
            error=ValidationError(
                code=ErrorCode.UNORDERED_SOURCE,
                message="Cannot paginate a source without an explicit ordering",
            )
        )

    item_count = await source.count()
    offset = (page - 1) * page_size
    items = await source.fetch(offset, page_size) if offset < item_count else ()

    return Success(
        value=PagedList(
            items=tuple(items),
            selected_page=page,
            total_pages=math.ceil(item_count / page_size),
            page_size=page_size,
            item_count=item_count,
        )
    )
