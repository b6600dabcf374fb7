"""Unit of work protocol.

One unit of work wraps one persistence session. The session is not safe
for concurrent use: operations against it must be awaited one at a time.
"""

from typing import Protocol


class UnitOfWork(Protocol):
    """Atomic commit boundary for staged repository changes."""

    async def commit(self) -> None:
        """Persist all staged changes atomically."""
        ...

    async def rollback(self) -> None:
        """Discard all staged changes."""
        ...
