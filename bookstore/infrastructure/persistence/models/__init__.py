"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from bookstore.infrastructure.persistence.models.author import Author
from bookstore.infrastructure.persistence.models.book import Book
from bookstore.infrastructure.persistence.models.category import Category
from bookstore.infrastructure.persistence.models.rating import Rating
from bookstore.infrastructure.persistence.models.user import User

__all__ = [
    "Author",
    "Book",
    "Category",
    "Rating",
    "User",
]
