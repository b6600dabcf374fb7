"""RatingRepository protocol."""

from typing import Protocol
from uuid import UUID

from bookstore.domain.entities.rating import Rating


class RatingRepository(Protocol):
    """Rating repository protocol (port)."""

    async def find(self, user_id: UUID, book_id: UUID) -> Rating | None:
        """Find the rating a user gave a book, or None."""
        ...

    async def add(self, rating: Rating) -> None:
        """Stage a new rating for insertion."""
        ...

    async def update(self, rating: Rating) -> None:
        """Stage a star change for an existing rating."""
        ...
