"""Repository implementations (adapters for hexagonal architecture)."""

from bookstore.infrastructure.persistence.repositories.author_repository import (
    AuthorRepository,
)
from bookstore.infrastructure.persistence.repositories.book_repository import (
    BookRepository,
)
from bookstore.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from bookstore.infrastructure.persistence.repositories.rating_repository import (
    RatingRepository,
)
from bookstore.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "CategoryRepository",
    "RatingRepository",
    "UserRepository",
]
