"""SQLAlchemy-backed PageSource.

Wraps a SELECT statement so the pagination engine can count it and pull
one ordered window at a time. The statement is never executed until
``count`` or ``fetch`` is awaited.
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

T = TypeVar("T")


class SelectPageSource(Generic[T]):
    """PageSource over a SELECT statement.

    Attributes:
        session: Session used for both count and fetch.

    Example:
        >>> source = SelectPageSource(
        ...     session,
        ...     select(Book.id, Book.name),
        ...     order_by=(Book.price.asc(), Book.id.asc()),
        ...     mapper=lambda row: row.name,
        ... )
        >>> await source.count()
        42
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        *,
        order_by: Sequence[ColumnElement[Any]],
        mapper: Callable[[Row[Any]], T],
    ) -> None:
        self.session = session
        self._statement = statement
        self._order_by = tuple(order_by)
        self._mapper = mapper

    @property
    def is_ordered(self) -> bool:
        return bool(self._order_by)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._statement.subquery())
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def fetch(self, offset: int, limit: int) -> list[T]:
        stmt = self._statement.order_by(*self._order_by).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._mapper(row) for row in result.all()]
