"""Book database model.

Books reference shared Author and Category rows. The relationships are
used when inserting a book so that a newly built author or category is
inserted first, in the same flush.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.infrastructure.persistence.base import BaseMutableModel
from bookstore.infrastructure.persistence.models.author import Author
from bookstore.infrastructure.persistence.models.category import Category


class Book(BaseMutableModel):
    """Catalog book row.

    Fields:
        name: Title
        price: List price
        sale_price: Discounted price (nullable)
        sale: On-sale flag
        photo_url: Cover image reference (nullable)
        author_id: FK to authors
        category_id: FK to categories

    Constraints:
        - uq_books_name_author: one book per (name, author)

    Indexes:
        - idx_books_price_id: (price, id) listing order
    """

    __tablename__ = "books"
    __table_args__ = (
        UniqueConstraint("name", "author_id", name="uq_books_name_author"),
        Index("idx_books_price_id", "price", "id"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    sale_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    sale: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    author_id: Mapped[UUID] = mapped_column(
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    author: Mapped[Author] = relationship(lazy="raise")
    category: Mapped[Category] = relationship(lazy="raise")
