"""UpdateBook command handler.

Flow:
    1. Load the book (NotFound when missing)
    2. Reject a (name, author) pair that another book already has
    3. Resolve author and category as AddBook does
    4. Stage the changed book and commit

Sale state and photo reference carry over unchanged.
"""

from bookstore.application.commands.catalog_commands import UpdateBook
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import ConflictError, DomainError, NotFoundError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.protocols.author_repository import AuthorRepository
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.category_repository import CategoryRepository
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork


class UpdateBookHandler:
    """Handler for UpdateBook command.

    Returns:
        Result[None, DomainError]: Success(None), Failure(NotFoundError) or
        Failure(ConflictError)
    """

    def __init__(
        self,
        book_repo: BookRepository,
        author_repo: AuthorRepository,
        category_repo: CategoryRepository,
        unit_of_work: UnitOfWork,
        logger: LoggerProtocol,
    ) -> None:
        self._book_repo = book_repo
        self._author_repo = author_repo
        self._category_repo = category_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: UpdateBook) -> Result[None, DomainError]:
        """Handle UpdateBook command.

        Args:
            cmd: UpdateBook command.

        Returns:
            Success(None) when the book was changed.
            Failure(NotFoundError) if the book does not exist.
            Failure(ConflictError) if the author already has another book
            with the new name; nothing is written in that case.
        """
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

        current_key = (book.name, book.author.name, book.author.surname)
        new_key = (cmd.name, cmd.author_name, cmd.author_surname)
        if new_key != current_key and await self._book_repo.exists(*new_key):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.BOOK_ALREADY_EXISTS,
                    message="Book already exists",
                    resource_type="Book",
                    conflicting_field="name",
                )
            )

        book.name = cmd.name
        book.price = cmd.price
        book.author = await self._author_repo.find_or_build(
            cmd.author_name, cmd.author_surname
        )
        book.category = await self._category_repo.find_or_build(cmd.category_name)

        try:
            await self._book_repo.update(book)
            await self._unit_of_work.commit()
        except Exception as e:
            self._logger.error("book_update_failed", error=e, book_id=str(book.id))
            await self._unit_of_work.rollback()
            raise

        self._logger.info(
            "book_updated",
            book_id=str(book.id),
            book_name=book.name,
            author_id=str(book.author.id),
            category_id=str(book.category.id),
        )
        return Success(value=None)
