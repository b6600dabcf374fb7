"""Catalog request and response schemas.

Pydantic models for books, ratings and categories. Response models are
built from application values with ``from_*`` classmethods so routers never
touch domain objects directly.
"""

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field

from bookstore.application.pagination import PagedList
from bookstore.domain.entities.category import Category
from bookstore.domain.value_objects.book_view import BookView

MAX_PAGE = 1_000_000
MAX_PRICE = Decimal("99999999.99")

PageQuery = Annotated[
    int,
    Query(le=MAX_PAGE, description="Page number (values below 1 mean 1)"),
]


# =============================================================================
# Requests
# =============================================================================


class AddBookRequest(BaseModel):
    """Request schema for adding a book.

    Attributes:
        name: Book title.
        price: Non-negative price.
        author_name: Author first name.
        author_surname: Author surname (optional).
        category_name: Category name; created when missing.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Dune",
                "price": "9.99",
                "author_name": "Frank",
                "author_surname": "Herbert",
                "category_name": "SciFi",
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255, description="Book title")
    price: Decimal = Field(..., ge=0, le=MAX_PRICE, description="Book price")
    author_name: str = Field(
        ..., min_length=1, max_length=100, description="Author first name"
    )
    author_surname: str | None = Field(
        None, max_length=100, description="Author surname"
    )
    category_name: str = Field(
        ..., min_length=1, max_length=100, description="Category name"
    )


class UpdateBookRequest(AddBookRequest):
    """Request schema for replacing a book's title, price, author and category.

    Same fields and bounds as AddBookRequest.
    """


class SetBookSaleRequest(BaseModel):
    """Request schema for putting a book on sale or ending its sale.

    Attributes:
        sale: Whether the book is on sale.
        sale_price: Discounted price; required while on sale, dropped when
            the sale ends.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"sale": True, "sale_price": "7.99"}}
    )

    sale: bool = Field(..., description="Book is on sale")
    sale_price: Decimal | None = Field(
        None, ge=0, le=MAX_PRICE, description="Discounted price"
    )


class AddRatingRequest(BaseModel):
    """Request schema for rating a book."""

    user_id: UUID = Field(..., description="Rating user")
    stars: int = Field(..., ge=1, le=5, description="Star rating (1-5)")


# =============================================================================
# Responses
# =============================================================================


class CreatedResponse(BaseModel):
    """Identifier of a created (or updated) resource."""

    id: UUID = Field(..., description="Resource identifier")


class BookViewResponse(BaseModel):
    """Single book row in a catalog listing."""

    id: UUID
    name: str
    price: Decimal
    sale_price: Decimal | None = None
    sale: bool = False
    photo_url: str | None = None
    average_rating: float = Field(..., description="Mean stars, 1 decimal; 0.0 if unrated")
    author_name: str
    author_surname: str | None = None
    category_name: str

    @classmethod
    def from_view(cls, view: BookView) -> "BookViewResponse":
        """Create response from a BookView projection."""
        return cls(
            id=view.id,
            name=view.name,
            price=view.price,
            sale_price=view.sale_price,
            sale=view.sale,
            photo_url=view.photo_url,
            average_rating=view.average_rating,
            author_name=view.author_name,
            author_surname=view.author_surname,
            category_name=view.category_name,
        )


class PagedBooksResponse(BaseModel):
    """Paginated book listing.

    Attributes:
        data: Books on the selected page.
        selected_page: 1-based page number.
        total_pages: Number of pages for the full result set.
        page_size: Items per page.
        item_count: Total matching books.
    """

    data: list[BookViewResponse]
    selected_page: int
    total_pages: int
    page_size: int
    item_count: int

    @classmethod
    def from_paged(cls, paged: PagedList[BookView]) -> "PagedBooksResponse":
        """Create response from a PagedList of BookView."""
        return cls(
            data=[BookViewResponse.from_view(view) for view in paged.items],
            selected_page=paged.selected_page,
            total_pages=paged.total_pages,
            page_size=paged.page_size,
            item_count=paged.item_count,
        )


class CategoryResponse(BaseModel):
    """Category entry."""

    id: UUID
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)
