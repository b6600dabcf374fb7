"""Read model for catalog listings."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class BookView:
    """Flattened, read-optimized projection of a Book.

    Attributes:
        id: Book identifier.
        name: Title.
        price: List price.
        average_rating: Mean star rating rounded to one decimal (0.0 when unrated).
        author_name: Author given name.
        author_surname: Author family name, if any.
        category_name: Category name.
        sale_price: Discounted price, if any.
        sale: Whether the book is on sale.
        photo_url: Optional cover image reference.
    """

    id: UUID
    name: str
    price: Decimal
    average_rating: float
    author_name: str
    author_surname: str | None
    category_name: str
    sale_price: Decimal | None = None
    sale: bool = False
    photo_url: str | None = None
