"""Ordered, lazily evaluated source of items for pagination."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class PageSource(Protocol[T_co]):
    """A filtered result set that can be counted and windowed.

    Nothing is loaded until ``count`` or ``fetch`` is awaited. Both calls
    share the same filter so that the count matches the windowed items.
    """

    @property
    def is_ordered(self) -> bool:
        """True when the source carries an explicit ordering."""
        ...

    async def count(self) -> int:
        """Total number of matching items."""
        ...

    async def fetch(self, offset: int, limit: int) -> Sequence[T_co]:
        """Return at most ``limit`` items starting at ``offset`` in order."""
        ...
