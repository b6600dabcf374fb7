"""Catalog listing query handlers.

All three handlers share one projection (BookView), one ordering (price
ascending, then id) and one paging shape (PagedList). They differ only in
the filter applied to the source.

Handlers:
    1. ListBooksHandler: every book
    2. ListBooksByCategoryHandler: one category (the category must exist)
    3. ListBooksByNameHandler: name contains a substring

Page numbers below 1 are clamped to 1; page size comes from Settings.
"""

from bookstore.application.pagination import PagedList, paginate
from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
)
from bookstore.core.config import Settings
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import DomainError, NotFoundError
from bookstore.core.result import Failure, Result
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.category_repository import CategoryRepository
from bookstore.domain.value_objects.book_view import BookView


def _clamp_page(page: int) -> int:
    return max(page, 1)


class ListBooksHandler:
    """Handler for ListBooks query."""

    def __init__(self, book_repo: BookRepository, settings: Settings) -> None:
        self._book_repo = book_repo
        self._page_size = settings.page_size

    async def handle(self, query: ListBooks) -> Result[PagedList[BookView], DomainError]:
        return await paginate(
            self._book_repo.page_views(),
            _clamp_page(query.page),
            self._page_size,
        )


class ListBooksByCategoryHandler:
    """Handler for ListBooksByCategory query.

    Verifies the category exists before listing, so an unknown category is
    reported as NotFound rather than as an empty page.
    """

    def __init__(
        self,
        book_repo: BookRepository,
        category_repo: CategoryRepository,
        settings: Settings,
    ) -> None:
        self._book_repo = book_repo
        self._category_repo = category_repo
        self._page_size = settings.page_size

    async def handle(
        self, query: ListBooksByCategory
    ) -> Result[PagedList[BookView], DomainError]:
        """Handle ListBooksByCategory query.

        Returns:
            Success(PagedList[BookView]) for an existing category.
            Failure(NotFoundError) if the category does not exist.
        """
        category = await self._category_repo.find_by_id(query.category_id)
        if category is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.CATEGORY_NOT_FOUND,
                    message=f"Category on this Id: {query.category_id} doesn't exists",
                    resource_type="Category",
                    resource_id=str(query.category_id),
                )
            )

        return await paginate(
            self._book_repo.page_views(category_id=category.id),
            _clamp_page(query.page),
            self._page_size,
        )


class ListBooksByNameHandler:
    """Handler for ListBooksByName query (substring match on the title)."""

    def __init__(self, book_repo: BookRepository, settings: Settings) -> None:
        self._book_repo = book_repo
        self._page_size = settings.page_size

    async def handle(
        self, query: ListBooksByName
    ) -> Result[PagedList[BookView], DomainError]:
        return await paginate(
            self._book_repo.page_views(name_contains=query.name),
            _clamp_page(query.page),
            self._page_size,
        )
