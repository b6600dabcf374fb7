"""Author domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Author:
    """Book author, identified in the catalog by (name, surname).

    An Author built by ``AuthorRepository.find_or_build`` may not be
    persisted yet; it is inserted together with the first Book that
    references it.

    Attributes:
        id: Unique author identifier.
        name: Given name.
        surname: Family name (optional for mononymous authors).
    """

    id: UUID
    name: str
    surname: str | None = None

    @property
    def full_name(self) -> str:
        """Name and surname joined for display."""
        return f"{self.name} {self.surname}" if self.surname else self.name
