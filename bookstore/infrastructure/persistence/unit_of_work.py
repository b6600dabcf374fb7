"""SQLAlchemy unit of work (commit boundary for one session)."""

from sqlalchemy.ext.asyncio import AsyncSession


class SQLAlchemyUnitOfWork:
    """Commits or rolls back everything staged on one AsyncSession.

    Implements the UnitOfWork protocol structurally.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request-scoped session.

        Args:
            session: SQLAlchemy async session shared with the repositories.
        """
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
