"""SetBookSale command handler.

Putting a book on sale requires a sale price. Ending a sale clears the
stored sale price.
"""

from bookstore.application.commands.catalog_commands import SetBookSale
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import DomainError, NotFoundError, ValidationError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork


class SetBookSaleHandler:
    """Handler for SetBookSale command.

    Returns:
        Result[None, DomainError]: Success(None), Failure(ValidationError) or
        Failure(NotFoundError)
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

    async def handle(self, cmd: SetBookSale) -> Result[None, DomainError]:
        """Handle SetBookSale command."""
        if cmd.sale and cmd.sale_price is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Sale price is required while the book is on sale",
                    field="sale_price",
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

        book.sale = cmd.sale
        book.sale_price = cmd.sale_price if cmd.sale else None

        try:
            await self._book_repo.update(book)
            await self._unit_of_work.commit()
        except Exception as e:
            self._logger.error("book_sale_update_failed", error=e, book_id=str(book.id))
            await self._unit_of_work.rollback()
            raise

        self._logger.info(
            "book_sale_updated",
            book_id=str(book.id),
            sale=book.sale,
            sale_price=str(book.sale_price) if book.sale_price is not None else None,
        )
        return Success(value=None)
