"""Catalog queries for CQRS read operations.

Queries are immutable dataclasses with no business logic. Page numbers are
1-based; handlers clamp anything below 1 to the first page. Page size comes
from configuration, not from the caller.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListBooks:
    """List every book, cheapest first.

    Attributes:
        page: Requested page (values below 1 mean page 1).
    """

    page: int = 1


@dataclass(frozen=True, kw_only=True)
class ListBooksByCategory:
    """List books in one category, cheapest first.

    Attributes:
        category_id: Category to filter on (must exist).
        page: Requested page.
    """

    category_id: UUID
    page: int = 1


@dataclass(frozen=True, kw_only=True)
class ListBooksByName:
    """List books whose name contains a substring, cheapest first.

    Attributes:
        name: Substring to search for.
        page: Requested page.
    """

    name: str
    page: int = 1


@dataclass(frozen=True, kw_only=True)
class ListCategories:
    """List all categories by name."""
