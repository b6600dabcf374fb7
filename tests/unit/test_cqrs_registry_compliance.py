"""CQRS registry compliance tests.

Every command and query is registered exactly once, every handler exposes
handle(), and every handler can be auto-wired by the handler factory.
"""

import pytest

from bookstore.application.commands.catalog_commands import (
    AddBook,
    AddRating,
    DeleteBook,
    SetBookSale,
    UpdateBook,
)
from bookstore.application.commands.handlers.add_book_handler import AddBookHandler
from bookstore.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    get_handler_class,
    validate_registry_consistency,
)
from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
    ListCategories,
)
from bookstore.core.container.handler_factory import (
    handler_dependencies,
    session_providers,
    singleton_providers,
)


@pytest.mark.unit
class TestRegistryCompliance:
    """Registry-wide checks."""

    def test_registry_is_consistent(self):
        assert validate_registry_consistency() == []

    @pytest.mark.parametrize(
        "request_class",
        [
            AddBook,
            AddRating,
            UpdateBook,
            SetBookSale,
            DeleteBook,
            ListBooks,
            ListBooksByCategory,
            ListBooksByName,
            ListCategories,
        ],
    )
    def test_every_request_has_a_handler(self, request_class):
        assert get_handler_class(request_class) is not None

    def test_unknown_request_has_no_handler(self):
        assert get_handler_class(str) is None

    def test_lookup_returns_registered_handler(self):
        assert get_handler_class(AddBook) is AddBookHandler

    def test_paginated_queries_are_flagged(self):
        paginated = {meta.query_class for meta in QUERY_REGISTRY if meta.is_paginated}
        assert paginated == {ListBooks, ListBooksByCategory, ListBooksByName}

    def test_commands_require_transaction(self):
        assert all(meta.requires_transaction for meta in COMMAND_REGISTRY)

    @pytest.mark.parametrize(
        "handler_class",
        [meta.handler_class for meta in COMMAND_REGISTRY]
        + [meta.handler_class for meta in QUERY_REGISTRY],
    )
    def test_handler_dependencies_are_resolvable(self, handler_class):
        providers = session_providers() | singleton_providers()

        for dep in handler_dependencies(handler_class):
            assert dep.annotation in providers or dep.optional, (
                f"{handler_class.__name__}.{dep.name} has no provider"
            )
