"""Unit tests for AddRatingHandler.

Tests cover:
- First rating for (user, book) is inserted
- Subsequent rating for the same pair updates stars in place
- Unknown user / unknown book return NotFoundError
- Star range is enforced by the command
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from bookstore.application.commands.catalog_commands import AddRating
from bookstore.application.commands.handlers.add_rating_handler import (
    AddRatingHandler,
)
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import NotFoundError
from bookstore.core.result import Failure, Success
from bookstore.domain.entities import Author, Book, Category, Rating, User


@pytest.fixture
def user():
    return User(id=uuid7(), username="alice", email="alice@example.com")


@pytest.fixture
def book():
    return Book(
        id=uuid7(),
        name="Dune",
        price=Decimal("20"),
        author=Author(id=uuid7(), name="Frank", surname="Herbert"),
        category=Category(id=uuid7(), name="Sci-Fi"),
    )


@pytest.fixture
def deps(user, book):
    user_repo = AsyncMock()
    user_repo.find_by_id.return_value = user
    book_repo = AsyncMock()
    book_repo.find_by_id.return_value = book
    rating_repo = AsyncMock()
    rating_repo.find.return_value = None
    unit_of_work = AsyncMock()
    return user_repo, book_repo, rating_repo, unit_of_work


@pytest.fixture
def handler(deps):
    user_repo, book_repo, rating_repo, unit_of_work = deps
    return AddRatingHandler(
        user_repo=user_repo,
        book_repo=book_repo,
        rating_repo=rating_repo,
        unit_of_work=unit_of_work,
        logger=Mock(),
    )


@pytest.mark.unit
class TestAddRatingHandlerUpsert:
    """Test insert-or-update behaviour."""

    async def test_first_rating_is_inserted(self, handler, deps, user, book):
        # Arrange
        _, _, rating_repo, unit_of_work = deps

        # Act
        result = await handler.handle(
            AddRating(user_id=user.id, book_id=book.id, stars=4)
        )

        # Assert
        assert isinstance(result, Success)
        inserted: Rating = rating_repo.add.call_args.args[0]
        assert result.value == inserted.id
        assert (inserted.user_id, inserted.book_id, inserted.stars) == (
            user.id,
            book.id,
            4,
        )
        rating_repo.update.assert_not_awaited()
        unit_of_work.commit.assert_awaited_once()

    async def test_existing_rating_is_updated(self, handler, deps, user, book):
        # Arrange
        _, _, rating_repo, unit_of_work = deps
        existing = Rating(id=uuid7(), user_id=user.id, book_id=book.id, stars=2)
        rating_repo.find.return_value = existing

        # Act
        result = await handler.handle(
            AddRating(user_id=user.id, book_id=book.id, stars=5)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value == existing.id
        assert existing.stars == 5
        rating_repo.update.assert_awaited_once_with(existing)
        rating_repo.add.assert_not_awaited()
        unit_of_work.commit.assert_awaited_once()


@pytest.mark.unit
class TestAddRatingHandlerNotFound:
    """Test missing user or book."""

    async def test_unknown_user(self, handler, deps, book):
        user_repo, _, rating_repo, unit_of_work = deps
        user_repo.find_by_id.return_value = None

        result = await handler.handle(
            AddRating(user_id=uuid7(), book_id=book.id, stars=3)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        assert result.error.message == "User not found"
        rating_repo.find.assert_not_awaited()
        unit_of_work.commit.assert_not_awaited()

    async def test_unknown_book(self, handler, deps, user):
        _, book_repo, rating_repo, _ = deps
        book_repo.find_by_id.return_value = None

        result = await handler.handle(
            AddRating(user_id=user.id, book_id=uuid7(), stars=3)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.BOOK_NOT_FOUND
        assert result.error.message == "Book not found"
        rating_repo.add.assert_not_awaited()


@pytest.mark.unit
class TestAddRatingCommand:
    """Test star range on the command."""

    @pytest.mark.parametrize("stars", [0, 6, -1])
    def test_out_of_range_stars_rejected(self, stars):
        with pytest.raises(ValueError):
            AddRating(user_id=uuid7(), book_id=uuid7(), stars=stars)
