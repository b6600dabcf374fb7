"""Common error classes used across the catalog.

Error Types:
- ValidationError: Invalid input (page number, page size, unordered source)
- NotFoundError: Resource not found (book, user, category)
- ConflictError: Resource conflicts (duplicate book for an author)

Usage:
    from bookstore.core.errors import ConflictError
    from bookstore.core.enums import ErrorCode
    from bookstore.core.result import Failure

    return Failure(error=ConflictError(
        code=ErrorCode.BOOK_ALREADY_EXISTS,
        message="Book already exists",
        resource_type="Book",
        conflicting_field="name",
    ))
"""

from dataclasses import dataclass

from bookstore.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Book, User, Category).
        resource_id: Identifier used for the lookup.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    resource_type: str
    conflicting_field: str | None = None
