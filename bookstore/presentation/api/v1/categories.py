"""Categories resource router.

Endpoints:
    GET /api/v1/categories                        - List categories
    GET /api/v1/categories/{category_id}/books    - List books of a category (paged)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from bookstore.application.dispatcher import Dispatcher
from bookstore.application.queries.book_queries import (
    ListBooksByCategory,
    ListCategories,
)
from bookstore.core.container import get_dispatcher
from bookstore.core.result import Failure, Success
from bookstore.presentation.api.middleware.trace_middleware import get_trace_id
from bookstore.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from bookstore.schemas.catalog_schemas import (
    CategoryResponse,
    PagedBooksResponse,
    PageQuery,
)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[CategoryResponse] | JSONResponse:
    """List all categories.

    GET /api/v1/categories → 200 OK
    """
    result = await dispatcher.send(ListCategories())

    match result:
        case Success(value=categories):
            return [CategoryResponse.from_entity(c) for c in categories]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get(
    "/{category_id}/books",
    response_model=PagedBooksResponse,
    responses={
        404: {"description": "Category not found", "model": ProblemDetails},
    },
    summary="List books by category",
)
async def list_category_books(
    request: Request,
    category_id: Annotated[UUID, Path(description="Category UUID")],
    page: PageQuery = 1,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PagedBooksResponse | JSONResponse:
    """List books in one category.

    GET /api/v1/categories/{category_id}/books → 200 OK
    """
    result = await dispatcher.send(
        ListBooksByCategory(category_id=category_id, page=page)
    )

    match result:
        case Success(value=paged):
            return PagedBooksResponse.from_paged(paged)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
