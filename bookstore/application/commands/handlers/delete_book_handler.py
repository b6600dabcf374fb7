"""DeleteBook command handler."""

from bookstore.application.commands.catalog_commands import DeleteBook
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import DomainError, NotFoundError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork


class DeleteBookHandler:
    """Handler for DeleteBook command.

    The book's ratings go with it; its author and category stay.
    """

    def __init__(
        self,
        book_repo: BookRepository,
        unit_of_work: UnitOfWork,
        logger: LoggerProtocol,
    ) -> None:
        self._book_repo = book_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: DeleteBook) -> Result[None, DomainError]:
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

        try:
            await self._book_repo.delete(book.id)
            await self._unit_of_work.commit()
        except Exception as e:
            self._logger.error("book_delete_failed", error=e, book_id=str(book.id))
            await self._unit_of_work.rollback()
            raise

        self._logger.info("book_deleted", book_id=str(book.id), book_name=book.name)
        return Success(value=None)
