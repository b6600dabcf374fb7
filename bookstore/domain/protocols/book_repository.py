"""BookRepository protocol for catalog persistence."""

from typing import Protocol
from uuid import UUID

from bookstore.domain.entities.book import Book
from bookstore.domain.protocols.page_source_protocol import PageSource
from bookstore.domain.value_objects.book_view import BookView


class BookRepository(Protocol):
    """Book repository protocol (port).

    Implementations:
        - BookRepository (SQLAlchemy): bookstore/infrastructure/persistence/repositories/
    """

    async def exists(
        self, name: str, author_name: str, author_surname: str | None
    ) -> bool:
        """Check whether a book with this name exists for the given author."""
        ...

    async def find_by_id(self, book_id: UUID) -> Book | None:
        """Find book by ID, or None."""
        ...

    async def add(self, book: Book) -> None:
        """Stage a new book for insertion.

        Author and Category rows that do not exist yet are inserted with
        it. Nothing is visible to other sessions until commit.
        """
        ...

    async def update(self, book: Book) -> None:
        """Stage changes to an existing book.

        Writes every column, including sale state and photo reference. A new
        author or category is inserted as with add().
        """
        ...

    async def delete(self, book_id: UUID) -> None:
        """Stage removal of a book and its ratings."""
        ...

    def page_views(
        self,
        *,
        category_id: UUID | None = None,
        name_contains: str | None = None,
    ) -> PageSource[BookView]:
        """Build an ordered BookView source with optional filters.

        Args:
            category_id: Restrict to one category.
            name_contains: Substring the book name must contain.

        Returns:
            Source ordered by price ascending, then id.
        """
        ...
