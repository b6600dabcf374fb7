"""AuthorRepository protocol."""

from typing import Protocol

from bookstore.domain.entities.author import Author


class AuthorRepository(Protocol):
    """Author repository protocol (port)."""

    async def find_or_build(self, name: str, surname: str | None) -> Author:
        """Return the stored author matching (name, surname), or build one.

        A newly built Author is NOT persisted; it is inserted with the Book
        that references it.
        """
        ...
