"""Unit tests for catalog query handlers.

Tests cover:
- ListBooks pages the unfiltered source with the configured page size
- Page numbers below 1 are treated as page 1
- ListBooksByCategory: NotFound for an unknown category, filter applied otherwise
- ListBooksByName: name filter applied
- ListCategories returns every category
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
    ListCategories,
)
from bookstore.application.queries.handlers.list_books_handler import (
    ListBooksByCategoryHandler,
    ListBooksByNameHandler,
    ListBooksHandler,
)
from bookstore.application.queries.handlers.list_categories_handler import (
    ListCategoriesHandler,
)
from bookstore.core.config import Settings
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import NotFoundError
from bookstore.core.result import Failure, Success
from bookstore.domain.entities import Category


class StaticPageSource:
    """Ordered PageSource returning fixed items."""

    is_ordered = True

    def __init__(self, items):
        self._items = list(items)

    async def count(self):
        return len(self._items)

    async def fetch(self, offset, limit):
        return self._items[offset : offset + limit]


@pytest.fixture
def settings():
    return Settings(page_size=2)


@pytest.fixture
def book_repo():
    repo = Mock()
    repo.page_views.return_value = StaticPageSource(["a", "b", "c"])
    return repo


@pytest.mark.unit
class TestListBooksHandler:
    """Test unfiltered listing."""

    async def test_uses_configured_page_size(self, book_repo, settings):
        handler = ListBooksHandler(book_repo=book_repo, settings=settings)

        result = await handler.handle(ListBooks(page=2))

        assert isinstance(result, Success)
        assert result.value.items == ("c",)
        assert result.value.page_size == 2
        assert result.value.total_pages == 2
        book_repo.page_views.assert_called_once_with()

    @pytest.mark.parametrize("page", [0, -3])
    async def test_page_below_one_means_first_page(self, book_repo, settings, page):
        handler = ListBooksHandler(book_repo=book_repo, settings=settings)

        result = await handler.handle(ListBooks(page=page))

        assert isinstance(result, Success)
        assert result.value.selected_page == 1
        assert result.value.items == ("a", "b")


@pytest.mark.unit
class TestListBooksByCategoryHandler:
    """Test category-filtered listing."""

    async def test_unknown_category_returns_not_found(self, book_repo, settings):
        # Arrange
        category_repo = AsyncMock()
        category_repo.find_by_id.return_value = None
        handler = ListBooksByCategoryHandler(
            book_repo=book_repo, category_repo=category_repo, settings=settings
        )
        category_id = uuid7()

        # Act
        result = await handler.handle(ListBooksByCategory(category_id=category_id))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.CATEGORY_NOT_FOUND
        assert str(category_id) in result.error.message
        book_repo.page_views.assert_not_called()

    async def test_existing_category_filters_books(self, book_repo, settings):
        category = Category(id=uuid7(), name="Sci-Fi")
        category_repo = AsyncMock()
        category_repo.find_by_id.return_value = category
        handler = ListBooksByCategoryHandler(
            book_repo=book_repo, category_repo=category_repo, settings=settings
        )

        result = await handler.handle(ListBooksByCategory(category_id=category.id))

        assert isinstance(result, Success)
        book_repo.page_views.assert_called_once_with(category_id=category.id)


@pytest.mark.unit
class TestListBooksByNameHandler:
    """Test name search."""

    async def test_filters_by_name(self, book_repo, settings):
        handler = ListBooksByNameHandler(book_repo=book_repo, settings=settings)

        result = await handler.handle(ListBooksByName(name="une"))

        assert isinstance(result, Success)
        assert result.value.item_count == 3
        book_repo.page_views.assert_called_once_with(name_contains="une")


@pytest.mark.unit
class TestListCategoriesHandler:
    """Test category listing."""

    async def test_returns_all_categories(self):
        categories = [
            Category(id=uuid7(), name="Fantasy"),
            Category(id=uuid7(), name="Sci-Fi"),
        ]
        category_repo = AsyncMock()
        category_repo.list_all.return_value = categories
        handler = ListCategoriesHandler(category_repo=category_repo)

        result = await handler.handle(ListCategories())

        assert isinstance(result, Success)
        assert result.value == categories
