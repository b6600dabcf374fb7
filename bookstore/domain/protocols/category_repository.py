"""CategoryRepository protocol."""

from typing import Protocol
from uuid import UUID

from bookstore.domain.entities.category import Category


class CategoryRepository(Protocol):
    """Category repository protocol (port)."""

    async def find_by_id(self, category_id: UUID) -> Category | None:
        """Find category by ID, or None."""
        ...

    async def find_or_build(self, name: str) -> Category:
        """Return the stored category with this name, or build an unpersisted one."""
        ...

    async def list_all(self) -> list[Category]:
        """All categories ordered by name."""
        ...
