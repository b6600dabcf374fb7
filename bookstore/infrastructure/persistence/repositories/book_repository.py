"""BookRepository - SQLAlchemy implementation of BookRepository protocol.

Maps between domain Book entities and the books/authors/categories tables,
and builds the ordered BookView projection used by catalog listings.
"""

from uuid import UUID

from sqlalchemy import Row, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.domain.entities.author import Author
from bookstore.domain.entities.book import Book
from bookstore.domain.entities.category import Category
from bookstore.domain.value_objects.book_view import BookView
from bookstore.infrastructure.persistence.models.author import Author as AuthorModel
from bookstore.infrastructure.persistence.models.book import Book as BookModel
from bookstore.infrastructure.persistence.models.category import (
    Category as CategoryModel,
)
from bookstore.infrastructure.persistence.models.rating import Rating as RatingModel
from bookstore.infrastructure.persistence.page_source import SelectPageSource


class BookRepository:
    """SQLAlchemy implementation of BookRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = BookRepository(session)
        ...     source = repo.page_views(name_contains="Dune")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def exists(
        self, name: str, author_name: str, author_surname: str | None
    ) -> bool:
        """Check whether a book with this name exists for the given author.

        Args:
            name: Book title (exact match).
            author_name: Author given name.
            author_surname: Author family name (None matches NULL).

        Returns:
            True if a matching book exists.
        """
        stmt = (
            select(BookModel.id)
            .join(AuthorModel, BookModel.author_id == AuthorModel.id)
            .where(
                BookModel.name == name,
                AuthorModel.name == author_name,
                AuthorModel.surname.is_not_distinct_from(author_surname),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_id(self, book_id: UUID) -> Book | None:
        """Find book by ID with its author and category.

        Args:
            book_id: Book identifier.

        Returns:
            Domain Book entity if found, None otherwise.
        """
        stmt = (
            select(BookModel, AuthorModel, CategoryModel)
            .join(AuthorModel, BookModel.author_id == AuthorModel.id)
            .join(CategoryModel, BookModel.category_id == CategoryModel.id)
            .where(BookModel.id == book_id)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        book_model, author_model, category_model = row
        return self._to_domain(book_model, author_model, category_model)

    async def add(self, book: Book) -> None:
        """Stage a new book, inserting its author/category when new.

        Args:
            book: Domain Book entity. Its author and category may be
                unpersisted (built by find_or_build).
        """
        author_model = await self.session.get(AuthorModel, book.author.id)
        if author_model is None:
            author_model = AuthorModel(
                id=book.author.id,
                name=book.author.name,
                surname=book.author.surname,
            )

        category_model = await self.session.get(CategoryModel, book.category.id)
        if category_model is None:
            category_model = CategoryModel(id=book.category.id, name=book.category.name)

        book_model = BookModel(
            id=book.id,
            name=book.name,
            price=book.price,
            sale_price=book.sale_price,
            sale=book.sale,
            photo_url=book.photo_url,
            author=author_model,
            category=category_model,
        )
        self.session.add(book_model)

    async def update(self, book: Book) -> None:
        """Stage changes to an existing book.

        Args:
            book: Domain Book entity loaded by find_by_id and then changed.
                Its author and category may be unpersisted.

        Raises:
            LookupError: If the book row no longer exists.
        """
        book_model = await self.session.get(BookModel, book.id)
        if book_model is None:
            raise LookupError(f"Book {book.id} does not exist")

        if await self.session.get(AuthorModel, book.author.id) is None:
            self.session.add(
                AuthorModel(
                    id=book.author.id,
                    name=book.author.name,
                    surname=book.author.surname,
                )
            )
        if await self.session.get(CategoryModel, book.category.id) is None:
            self.session.add(
                CategoryModel(id=book.category.id, name=book.category.name)
            )
        await self.session.flush()

        book_model.name = book.name
        book_model.price = book.price
        book_model.sale_price = book.sale_price
        book_model.sale = book.sale
        book_model.photo_url = book.photo_url
        book_model.author_id = book.author.id
        book_model.category_id = book.category.id

    async def delete(self, book_id: UUID) -> None:
        """Stage removal of a book and its ratings.

        Ratings are deleted explicitly; SQLite does not enforce the
        ON DELETE CASCADE foreign key unless the pragma is enabled.

        Args:
            book_id: Book identifier.
        """
        await self.session.execute(
            delete(RatingModel).where(RatingModel.book_id == book_id)
        )
        await self.session.execute(delete(BookModel).where(BookModel.id == book_id))

    def page_views(
        self,
        *,
        category_id: UUID | None = None,
        name_contains: str | None = None,
    ) -> SelectPageSource[BookView]:
        """Build the ordered BookView source for catalog listings.

        Average rating is computed in SQL with a correlated subquery and is
        0 for books without ratings.

        Args:
            category_id: Restrict to one category.
            name_contains: Substring of the book name (LIKE wildcards escaped).

        Returns:
            Source ordered by price ascending, then id ascending.
        """
        average_rating = (
            select(func.coalesce(func.avg(RatingModel.stars), 0))
            .where(RatingModel.book_id == BookModel.id)
            .scalar_subquery()
        )
        stmt = (
            select(
                BookModel.id,
                BookModel.name,
                BookModel.price,
                average_rating.label("average_rating"),
                AuthorModel.name.label("author_name"),
                AuthorModel.surname.label("author_surname"),
                CategoryModel.name.label("category_name"),
                BookModel.sale_price,
                BookModel.sale,
                BookModel.photo_url,
            )
            .join(AuthorModel, BookModel.author_id == AuthorModel.id)
            .join(CategoryModel, BookModel.category_id == CategoryModel.id)
        )
        if category_id is not None:
            stmt = stmt.where(BookModel.category_id == category_id)
        if name_contains:
            stmt = stmt.where(BookModel.name.contains(name_contains, autoescape=True))

        return SelectPageSource(
            self.session,
            stmt,
            order_by=(BookModel.price.asc(), BookModel.id.asc()),
            mapper=_row_to_view,
        )

    def _to_domain(
        self,
        book_model: BookModel,
        author_model: AuthorModel,
        category_model: CategoryModel,
    ) -> Book:
        """Convert database rows to a domain Book."""
        return Book(
            id=book_model.id,
            name=book_model.name,
            price=book_model.price,
            author=Author(
                id=author_model.id,
                name=author_model.name,
                surname=author_model.surname,
            ),
            category=Category(id=category_model.id, name=category_model.name),
            sale_price=book_model.sale_price,
            sale=book_model.sale,
            photo_url=book_model.photo_url,
        )


def _row_to_view(row: Row) -> BookView:
    """Map a projection row to BookView (average rounded to one decimal)."""
    return BookView(
        id=row.id,
        name=row.name,
        price=row.price,
        average_rating=round(float(row.average_rating or 0), 1),
        author_name=row.author_name,
        author_surname=row.author_surname,
        category_name=row.category_name,
        sale_price=row.sale_price,
        sale=row.sale,
        photo_url=row.photo_url,
    )
