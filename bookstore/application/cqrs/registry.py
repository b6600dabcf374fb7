"""CQRS Registry - Single Source of Truth for Commands and Queries.

The dispatcher resolves handlers from this registry: each command or query
class maps to exactly one handler class.

Adding new commands/queries:
1. Define the command/query dataclass in *_commands.py / *_queries.py
2. Create the handler class in handlers/
3. Add an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
"""

from bookstore.application.commands.catalog_commands import (
    AddBook,
    AddRating,
    DeleteBook,
    SetBookSale,
    UpdateBook,
)
from bookstore.application.commands.handlers.add_book_handler import AddBookHandler
from bookstore.application.commands.handlers.add_rating_handler import (
    AddRatingHandler,
)
from bookstore.application.commands.handlers.delete_book_handler import (
    DeleteBookHandler,
)
from bookstore.application.commands.handlers.set_book_sale_handler import (
    SetBookSaleHandler,
)
from bookstore.application.commands.handlers.update_book_handler import (
    UpdateBookHandler,
)
from bookstore.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
    ListCategories,
)
from bookstore.application.queries.handlers.list_books_handler import (
    ListBooksByCategoryHandler,
    ListBooksByNameHandler,
    ListBooksHandler,
)
from bookstore.application.queries.handlers.list_categories_handler import (
    ListCategoriesHandler,
)

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=AddBook,
        handler_class=AddBookHandler,
        category=CQRSCategory.CATALOG,
        description="Add a book, creating its author and category when missing",
    ),
    CommandMetadata(
        command_class=UpdateBook,
        handler_class=UpdateBookHandler,
        category=CQRSCategory.CATALOG,
        description="Replace a book's title, price, author and category",
    ),
    CommandMetadata(
        command_class=SetBookSale,
        handler_class=SetBookSaleHandler,
        category=CQRSCategory.CATALOG,
        description="Put a book on sale or end its sale",
    ),
    CommandMetadata(
        command_class=DeleteBook,
        handler_class=DeleteBookHandler,
        category=CQRSCategory.CATALOG,
        description="Remove a book and its ratings",
    ),
    CommandMetadata(
        command_class=AddRating,
        handler_class=AddRatingHandler,
        category=CQRSCategory.RATINGS,
        description="Insert or update a user's star rating for a book",
    ),
]

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=ListBooks,
        handler_class=ListBooksHandler,
        category=CQRSCategory.CATALOG,
        is_paginated=True,
        description="List all books ordered by price",
    ),
    QueryMetadata(
        query_class=ListBooksByCategory,
        handler_class=ListBooksByCategoryHandler,
        category=CQRSCategory.CATALOG,
        is_paginated=True,
        description="List books of one category ordered by price",
    ),
    QueryMetadata(
        query_class=ListBooksByName,
        handler_class=ListBooksByNameHandler,
        category=CQRSCategory.CATALOG,
        is_paginated=True,
        description="List books whose name contains a substring",
    ),
    QueryMetadata(
        query_class=ListCategories,
        handler_class=ListCategoriesHandler,
        category=CQRSCategory.CATALOG,
        description="List all categories",
    ),
]


def get_handler_class(request_class: type) -> type | None:
    """Get the handler class registered for a command or query class.

    Returns:
        Handler class if registered, None otherwise.
    """
    for cmd_meta in COMMAND_REGISTRY:
        if cmd_meta.command_class is request_class:
            return cmd_meta.handler_class
    for qry_meta in QUERY_REGISTRY:
        if qry_meta.query_class is request_class:
            return qry_meta.handler_class
    return None


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    errors: list[str] = []

    request_classes = [meta.command_class for meta in COMMAND_REGISTRY] + [
        meta.query_class for meta in QUERY_REGISTRY
    ]
    if len(request_classes) != len(set(request_classes)):
        errors.append("A request class is registered more than once")

    handler_classes = [meta.handler_class for meta in COMMAND_REGISTRY] + [
        meta.handler_class for meta in QUERY_REGISTRY
    ]
    for handler_class in handler_classes:
        if not hasattr(handler_class, "handle"):
            errors.append(f"Handler {handler_class.__name__} missing handle() method")

    return errors
