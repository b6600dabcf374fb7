"""Author database model."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.infrastructure.persistence.base import BaseModel


class Author(BaseModel):
    """Author row, shared by every book the author wrote.

    Fields:
        name: Given name
        surname: Family name (nullable)

    Constraints:
        - uq_authors_name_surname: (name, surname) lookup key
    """

    __tablename__ = "authors"
    __table_args__ = (
        UniqueConstraint("name", "surname", name="uq_authors_name_surname"),
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    surname: Mapped[str | None] = mapped_column(String(100), nullable=True)
