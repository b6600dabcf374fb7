"""Catalog commands (CQRS write operations).

Commands represent user intent to change catalog state. They are immutable
(frozen=True) and keyword-only (kw_only=True). Handlers return Result types.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from bookstore.domain.entities.rating import validate_stars


@dataclass(frozen=True, kw_only=True)
class AddBook:
    """Add a book to the catalog.

    The author is matched by (author_name, author_surname) and the category
    by name; either is created when missing.

    Attributes:
        name: Book title.
        price: List price (non-negative).
        author_name: Author given name.
        author_surname: Author family name.
        category_name: Category name.

    Example:
        >>> command = AddBook(
        ...     name="Dune",
        ...     price=Decimal("20"),
        ...     author_name="Frank",
        ...     author_surname="Herbert",
        ...     category_name="Sci-Fi",
        ... )
    """

    name: str
    price: Decimal
    author_name: str
    author_surname: str | None
    category_name: str

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("price must not be negative")


@dataclass(frozen=True, kw_only=True)
class AddRating:
    """Set or update a user's star rating for a book.

    Attributes:
        user_id: Rating author.
        book_id: Rated book.
        stars: Star value, 1 to 5.
    """

    user_id: UUID
    book_id: UUID
    stars: int

    def __post_init__(self) -> None:
        validate_stars(self.stars)


@dataclass(frozen=True, kw_only=True)
class UpdateBook:
    """Replace a book's title, price, author and category.

    Author and category are resolved the same way as for AddBook. Sale
    state and photo reference are left unchanged.

    Attributes:
        book_id: Book to change.
        name: New title.
        price: New list price (non-negative).
        author_name: Author given name.
        author_surname: Author family name.
        category_name: Category name.
    """

    book_id: UUID
    name: str
    price: Decimal
    author_name: str
    author_surname: str | None
    category_name: str

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("price must not be negative")


@dataclass(frozen=True, kw_only=True)
class SetBookSale:
    """Put a book on sale or end its sale.

    Attributes:
        book_id: Book to change.
        sale_price: Discounted price; required while ``sale`` is True.
        sale: Whether the book is on sale.
    """

    book_id: UUID
    sale_price: Decimal | None
    sale: bool

    def __post_init__(self) -> None:
        if self.sale_price is not None and self.sale_price < 0:
            raise ValueError("sale_price must not be negative")


@dataclass(frozen=True, kw_only=True)
class DeleteBook:
    """Remove a book and its ratings from the catalog.

    Authors and categories stay, even when no book references them.
    """

    book_id: UUID
