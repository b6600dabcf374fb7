"""CQRS Metadata Types.

Dataclasses and enums describing registry entries. Entries are immutable
(frozen=True) and keyword-only (kw_only=True).
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional area of a command or query."""

    CATALOG = "catalog"  # Books, authors, categories
    RATINGS = "ratings"  # Star ratings


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., AddBook).
        handler_class: The handler class (e.g., AddBookHandler).
        category: Functional category for organization.
        requires_transaction: Whether the handler commits a unit of work.
        description: Human-readable description for documentation.
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    requires_transaction: bool = True
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., ListBooks).
        handler_class: The handler class (e.g., ListBooksHandler).
        category: Functional category for organization.
        is_paginated: Whether the handler returns a PagedList.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    is_paginated: bool = False
    description: str = ""
