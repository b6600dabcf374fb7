"""Queries - Read operations returning catalog projections."""

from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
    ListCategories,
)

__all__ = [
    "ListBooks",
    "ListBooksByCategory",
    "ListBooksByName",
    "ListCategories",
]
