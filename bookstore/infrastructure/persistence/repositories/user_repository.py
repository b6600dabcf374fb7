"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Read-only adapter: user rows are owned by the identity provider. Ratings
reference them by id; notification handlers look them up by username or
email.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.domain.entities.user import User
from bookstore.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """Look up users for ratings and account emails.

    Example:
        >>> async with database.get_session() as session:
        ...     user = await UserRepository(session).find_by_username("alice")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        return None if user_model is None else _to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        """Find user by exact (case-sensitive) username."""
        return await self._first(
            select(UserModel).where(UserModel.username == username)
        )

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address, ignoring case."""
        return await self._first(
            select(UserModel).where(func.lower(UserModel.email) == email.lower())
        )

    async def _first(self, stmt: Select[tuple[UserModel]]) -> User | None:
        user_model = (await self.session.execute(stmt)).scalar_one_or_none()
        return None if user_model is None else _to_domain(user_model)


def _to_domain(user_model: UserModel) -> User:
    return User(
        id=user_model.id,
        username=user_model.username,
        email=user_model.email,
        email_confirmed=user_model.email_confirmed,
    )
