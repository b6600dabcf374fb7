"""Category database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.infrastructure.persistence.base import BaseModel


class Category(BaseModel):
    """Category row, unique by name."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )
