"""UserRepository protocol (read only)."""

from typing import Protocol
from uuid import UUID

from bookstore.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Users are created by the identity provider; the catalog only reads them.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive)."""
        ...
