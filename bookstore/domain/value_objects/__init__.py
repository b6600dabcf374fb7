"""Domain value objects."""

from bookstore.domain.value_objects.book_view import BookView

__all__ = ["BookView"]
