"""Core errors package.

Usage:
    from bookstore.core.errors import DomainError, ValidationError, NotFoundError
"""

from bookstore.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from bookstore.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
