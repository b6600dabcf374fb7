"""Result types for railway-oriented programming.

Handlers return Result values instead of raising for expected business
failures (duplicates, missing resources, invalid paging). Infrastructure
failures still propagate as exceptions.

Usage:
    result = await handler.handle(ListBooks(page=1))
    match result:
        case Success(value=paged):
            print(paged.item_count)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
