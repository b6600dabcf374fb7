"""Books resource router.

Endpoints:
    GET    /api/v1/books                     - List books (paged, by price)
    GET    /api/v1/books/search?name=        - Search books by name (paged)
    POST   /api/v1/books                     - Add book
    PUT    /api/v1/books/{book_id}           - Update book
    PUT    /api/v1/books/{book_id}/sale      - Put book on sale or end sale
    DELETE /api/v1/books/{book_id}           - Delete book and its ratings
    POST   /api/v1/books/{book_id}/ratings   - Rate book (insert or update)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from bookstore.application.commands.catalog_commands import (
    AddBook,
    AddRating,
    DeleteBook,
    SetBookSale,
    UpdateBook,
)
from bookstore.application.dispatcher import Dispatcher
from bookstore.application.queries.book_queries import ListBooks, ListBooksByName
from bookstore.core.container import get_dispatcher
from bookstore.core.result import Failure, Success
from bookstore.presentation.api.middleware.trace_middleware import get_trace_id
from bookstore.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from bookstore.schemas.catalog_schemas import (
    AddBookRequest,
    AddRatingRequest,
    CreatedResponse,
    PagedBooksResponse,
    PageQuery,
    SetBookSaleRequest,
    UpdateBookRequest,
)

router = APIRouter(prefix="/books", tags=["Books"])


@router.get(
    "",
    response_model=PagedBooksResponse,
    summary="List books",
    description="List all books ordered by price, then id.",
)
async def list_books(
    request: Request,
    page: PageQuery = 1,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PagedBooksResponse | JSONResponse:
    """List books.

    GET /api/v1/books?page=2 → 200 OK
    """
    result = await dispatcher.send(ListBooks(page=page))

    match result:
        case Success(value=paged):
            return PagedBooksResponse.from_paged(paged)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get(
    "/search",
    response_model=PagedBooksResponse,
    summary="Search books",
    description="List books whose name contains the given text.",
)
async def search_books(
    request: Request,
    name: Annotated[str, Query(description="Substring to match in the book name")],
    page: PageQuery = 1,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PagedBooksResponse | JSONResponse:
    """Search books by name.

    GET /api/v1/books/search?name=une → 200 OK
    """
    result = await dispatcher.send(ListBooksByName(name=name, page=page))

    match result:
        case Success(value=paged):
            return PagedBooksResponse.from_paged(paged)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses={
        201: {"description": "Book added", "model": CreatedResponse},
        409: {"description": "Book already exists", "model": ProblemDetails},
    },
    summary="Add book",
    description="Add a book, creating its author and category when missing.",
)
async def add_book(
    request: Request,
    data: AddBookRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CreatedResponse | JSONResponse:
    """Add a book.

    POST /api/v1/books → 201 Created
    """
    command = AddBook(
        name=data.name,
        price=data.price,
        author_name=data.author_name,
        author_surname=data.author_surname,
        category_name=data.category_name,
    )
    result = await dispatcher.send(command)

    match result:
        case Success(value=book_id):
            return CreatedResponse(id=book_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Book updated"},
        404: {"description": "Book not found", "model": ProblemDetails},
        409: {"description": "Book already exists", "model": ProblemDetails},
    },
    summary="Update book",
    description="Replace title, price, author and category of a book.",
)
async def update_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    data: UpdateBookRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response | JSONResponse:
    """Update a book.

    PUT /api/v1/books/{book_id} → 204 No Content
    """
    command = UpdateBook(
        book_id=book_id,
        name=data.name,
        price=data.price,
        author_name=data.author_name,
        author_surname=data.author_surname,
        category_name=data.category_name,
    )
    result = await dispatcher.send(command)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.put(
    "/{book_id}/sale",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Sale updated"},
        400: {"description": "Sale price missing", "model": ProblemDetails},
        404: {"description": "Book not found", "model": ProblemDetails},
    },
    summary="Set book sale",
    description="Put a book on sale at a sale price, or end its sale.",
)
async def set_book_sale(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    data: SetBookSaleRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response | JSONResponse:
    """Put a book on sale or end its sale.

    PUT /api/v1/books/{book_id}/sale → 204 No Content
    """
    command = SetBookSale(book_id=book_id, sale_price=data.sale_price, sale=data.sale)
    result = await dispatcher.send(command)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Book deleted"},
        404: {"description": "Book not found", "model": ProblemDetails},
    },
    summary="Delete book",
    description="Remove a book and its ratings.",
)
async def delete_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response | JSONResponse:
    """Delete a book.

    DELETE /api/v1/books/{book_id} → 204 No Content
    """
    result = await dispatcher.send(DeleteBook(book_id=book_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "/{book_id}/ratings",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses={
        201: {"description": "Rating saved", "model": CreatedResponse},
        404: {"description": "User or book not found", "model": ProblemDetails},
    },
    summary="Rate book",
    description="Set the user's star rating for a book, replacing an earlier one.",
)
async def rate_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    data: AddRatingRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CreatedResponse | JSONResponse:
    """Insert or update a rating.

    POST /api/v1/books/{book_id}/ratings → 201 Created
    """
    command = AddRating(user_id=data.user_id, book_id=book_id, stars=data.stars)
    result = await dispatcher.send(command)

    match result:
        case Success(value=rating_id):
            return CreatedResponse(id=rating_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
