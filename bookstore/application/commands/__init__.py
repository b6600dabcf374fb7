"""Commands - Write operations that change catalog state."""

from bookstore.application.commands.catalog_commands import AddBook, AddRating

__all__ = [
    "AddBook",
    "AddRating",
]
