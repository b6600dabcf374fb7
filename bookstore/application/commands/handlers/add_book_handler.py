"""AddBook command handler.

Flow:
    1. Reject duplicates: same book name for the same author (name, surname)
    2. Resolve author by (name, surname), building one when missing
    3. Resolve category by name, building one when missing
    4. Stage the book (new author/category rows are inserted with it)
    5. Commit

Steps 2 and 3 share one session and therefore run one after the other.
Persistence failures are logged, rolled back and re-raised unchanged.
"""

from uuid import UUID

from uuid_extensions import uuid7

from bookstore.application.commands.catalog_commands import AddBook
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import ConflictError, DomainError
from bookstore.core.result import Failure, Result, Success
from bookstore.domain.entities.book import Book
from bookstore.domain.protocols.author_repository import AuthorRepository
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.category_repository import CategoryRepository
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork


class AddBookHandler:
    """Handler for AddBook command.

    Dependencies (injected via constructor):
        - BookRepository: Duplicate check and insertion
        - AuthorRepository: Author lookup-or-build
        - CategoryRepository: Category lookup-or-build
        - UnitOfWork: Commit boundary
        - LoggerProtocol: Structured logging

    Returns:
        Result[UUID, DomainError]: Success(book_id) or Failure(ConflictError)
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

    async def handle(self, cmd: AddBook) -> Result[UUID, DomainError]:
        """Handle AddBook command.

        Args:
            cmd: AddBook command.

        Returns:
            Success(book_id) when the book was created.
            Failure(ConflictError) when the author already has a book with
            this name; nothing is written in that case.
        """
        if await self._book_repo.exists(
            cmd.name, cmd.author_name, cmd.author_surname
        ):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.BOOK_ALREADY_EXISTS,
                    message="Book already exists",
                    resource_type="Book",
                    conflicting_field="name",
                )
            )

        author = await self._author_repo.find_or_build(
            cmd.author_name, cmd.author_surname
        )
        category = await self._category_repo.find_or_build(cmd.category_name)

        book = Book(
            id=uuid7(),
            name=cmd.name,
            price=cmd.price,
            author=author,
            category=category,
        )

        try:
            await self._book_repo.add(book)
            await self._unit_of_work.commit()
        except Exception as e:
            self._logger.error(
                "book_add_failed",
                error=e,
                book_name=cmd.name,
                author=author.full_name,
            )
            await self._unit_of_work.rollback()
            raise

        self._logger.info(
            "book_added",
            book_id=str(book.id),
            book_name=book.name,
            author_id=str(author.id),
            category_id=str(category.id),
        )
        return Success(value=book.id)
