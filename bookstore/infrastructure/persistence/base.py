"""Declarative bases for the catalog tables.

    BaseModel          id (UUID PK), created_at        → Author, Category
    BaseMutableModel   + updated_at (set on UPDATE)    → Book, Rating, User

Domain entities never inherit from these; repositories translate between
rows and entities. Ids are normally assigned by the domain (uuid7); the
uuid4 default only covers rows created directly, e.g. by fixtures.
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Root of every table model."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Base for rows that change after insert (prices, stars, confirmation)."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
