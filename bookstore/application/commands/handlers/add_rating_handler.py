"""AddRating command handler (upsert).

A user has at most one rating per book. The first submission inserts it;
later submissions change the stars of the existing row.
"""

from uuid import UUID

from uuid_extensions import uuid7

from bookstore.application.commands.catalog_commands import AddRating
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import DomainError, NotFoundError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.entities.rating import Rating
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.rating_repository import RatingRepository
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork
from bookstore.domain.protocols.user_repository import UserRepository


class AddRatingHandler:
    """Handler for AddRating command.

    Returns:
        Result[UUID, DomainError]: Success(rating_id) or Failure(NotFoundError)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        book_repo: BookRepository,
        rating_repo: RatingRepository,
        unit_of_work: UnitOfWork,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._book_repo = book_repo
        self._rating_repo = rating_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: AddRating) -> Result[UUID, DomainError]:
        """Handle AddRating command.

        Args:
            cmd: AddRating command (stars already range-checked).

        Returns:
            Success(rating_id) for both insert and update.
            Failure(NotFoundError) if the user or the book does not exist.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        book = await self._book_repo.find_by_id(cmd.book_id)
        if book is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.BOOK_NOT_FOUND,
                    message="Book not found",
                    resource_type="Book",
                    resource_id=str(cmd.book_id),
                )
            )

        rating = await self._rating_repo.find(cmd.user_id, cmd.book_id)
        created = rating is None

        try:
            if rating is None:
                rating = Rating(
                    id=uuid7(),
                    user_id=cmd.user_id,
                    book_id=cmd.book_id,
                    stars=cmd.stars,
                )
                await self._rating_repo.add(rating)
            else:
                rating.change_stars(cmd.stars)
                await self._rating_repo.update(rating)
            await self._unit_of_work.commit()
        except Exception as e:
            self._logger.error(
                "rating_save_failed",
                error=e,
                user_id=str(cmd.user_id),
                book_id=str(cmd.book_id),
            )
            await self._unit_of_work.rollback()
            raise

        self._logger.info(
            "rating_saved",
            rating_id=str(rating.id),
            book_id=str(cmd.book_id),
            stars=cmd.stars,
            created=created,
        )
        return Success(value=rating.id)
