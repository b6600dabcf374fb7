"""AuthorRepository - SQLAlchemy implementation of AuthorRepository protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from bookstore.domain.entities.author import Author
from bookstore.infrastructure.persistence.models.author import Author as AuthorModel


class AuthorRepository:
    """SQLAlchemy implementation of AuthorRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_or_build(self, name: str, surname: str | None) -> Author:
        """Return the stored author for (name, surname) or build a new one.

        The built author is NOT added to the session. BookRepository.add
        inserts it together with the book.

        Args:
            name: Author given name.
            surname: Author family name (None matches NULL).

        Returns:
            Domain Author entity (persisted or freshly built).
        """
        stmt = select(AuthorModel).where(
            AuthorModel.name == name,
            AuthorModel.surname.is_not_distinct_from(surname),
        )
        result = await self.session.execute(stmt)
        author_model = result.scalars().first()
        if author_model is None:
            return Author(id=uuid7(), name=name, surname=surname)
        return self._to_domain(author_model)

    def _to_domain(self, author_model: AuthorModel) -> Author:
        return Author(
            id=author_model.id,
            name=author_model.name,
            surname=author_model.surname,
        )
