"""Book domain entity.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from bookstore.domain.entities.author import Author
from bookstore.domain.entities.category import Category


@dataclass
class Book:
    """Catalog book.

    Business Rules:
        - (name, author) is unique across the catalog
        - Author and Category rows are shared between books; a Book only
          references them
        - sale_price is only meaningful while ``sale`` is True

    Attributes:
        id: Unique book identifier.
        name: Title.
        price: List price.
        author: Owning author (may be newly built, not yet persisted).
        category: Owning category (may be newly built, not yet persisted).
        sale_price: Discounted price, if any.
        sale: Whether the book is currently on sale.
        photo_url: Optional cover image reference.
    """

    id: UUID
    name: str
    price: Decimal
    author: Author
    category: Category
    sale_price: Decimal | None = None
    sale: bool = False
    photo_url: str | None = None

