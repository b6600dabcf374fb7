"""Async engine and session lifecycle.

The Database owns one engine per process. Each dispatched request borrows
one session from it via ``get_session()``; repositories and the unit of
work share that session and never create their own.

A session is NOT safe for concurrent use by two in-flight operations, so
everything awaited on one session runs strictly in sequence.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bookstore.infrastructure.persistence.base import BaseModel


def _engine_options(database_url: str, echo: bool, pool_size: int) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("postgresql"):
        # asyncpg connect options
        options["pool_size"] = pool_size
        options["connect_args"] = {
            "command_timeout": 60,
            "server_settings": {"jit": "off"},
        }
    return options


class Database:
    """Engine plus session factory.

    Usage:
        database = Database("sqlite+aiosqlite:///./bookstore.db")
        async with database.get_session() as session:
            ...  # committed on exit, rolled back on error or cancellation
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: int = 20) -> None:
        self.engine = create_async_engine(
            database_url, **_engine_options(database_url, echo, pool_size)
        )
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on normal exit.

        Any exception, including CancelledError from a timeout, rolls the
        session back and propagates unchanged.
        """
        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except BaseException:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every mapped table (tests and local development only)."""
        from bookstore.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Return True when the database answers ``SELECT 1``."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True
