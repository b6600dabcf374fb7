"""Domain entities for the book catalog.

Pure business logic entities with no framework dependencies.
"""

from bookstore.domain.entities.author import Author
from bookstore.domain.entities.book import Book
from bookstore.domain.entities.category import Category
from bookstore.domain.entities.rating import Rating
from bookstore.domain.entities.user import User

__all__ = [
    "Author",
    "Book",
    "Category",
    "Rating",
    "User",
]
