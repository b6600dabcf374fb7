"""API tests for the books and categories endpoints.

The dispatcher dependency is replaced by a stub, so these tests cover HTTP
mapping only: request parsing, response shapes and RFC 7807 errors.
"""

import math
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from bookstore.application.commands.catalog_commands import (
    AddBook,
    AddRating,
    DeleteBook,
    SetBookSale,
    UpdateBook,
)
from bookstore.application.pagination import PagedList
from bookstore.application.queries.book_queries import (
    ListBooks,
    ListBooksByCategory,
    ListBooksByName,
    ListCategories,
)
from bookstore.core.container import get_dispatcher
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import ConflictError, NotFoundError, ValidationError
from bookstore.core.result import Failure, Success
from bookstore.domain.entities.category import Category
from bookstore.domain.value_objects.book_view import BookView
from bookstore.main import app


# =============================================================================
# Test Doubles
# =============================================================================


def make_view(name: str = "Dune", price: str = "20.00") -> BookView:
    return BookView(
        id=uuid7(),
        name=name,
        price=Decimal(price),
        average_rating=4.0,
        author_name="Frank",
        author_surname="Herbert",
        category_name="Sci-Fi",
    )


def make_page(*views: BookView, page: int = 1, item_count: int | None = None):
    count = len(views) if item_count is None else item_count
    return PagedList(
        items=tuple(views),
        selected_page=page,
        total_pages=math.ceil(count / 10),
        page_size=10,
        item_count=count,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def stub_dispatcher():
    """Dispatcher double installed as the get_dispatcher dependency."""
    stub = AsyncMock()
    app.dependency_overrides[get_dispatcher] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_dispatcher, None)


@pytest.fixture
def client():
    """Provide test client."""
    return TestClient(app, raise_server_exceptions=False)


# =============================================================================
# Books
# =============================================================================


@pytest.mark.api
class TestListBooks:
    def test_returns_paged_json(self, client, stub_dispatcher):
        view = make_view()
        stub_dispatcher.send.return_value = Success(value=make_page(view))

        response = client.get("/api/v1/books")

        assert response.status_code == 200
        data = response.json()
        assert data["selected_page"] == 1
        assert data["total_pages"] == 1
        assert data["page_size"] == 10
        assert data["item_count"] == 1
        book = data["data"][0]
        assert book["id"] == str(view.id)
        assert book["name"] == "Dune"
        assert book["average_rating"] == 4.0
        assert book["author_surname"] == "Herbert"
        assert book["category_name"] == "Sci-Fi"

    def test_page_parameter_is_forwarded(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page(page=3))

        client.get("/api/v1/books", params={"page": 3})

        stub_dispatcher.send.assert_awaited_once_with(ListBooks(page=3))

    def test_page_above_limit_rejected(self, client, stub_dispatcher):
        huge_page = 10_000_000_000_000_000_000

        response = client.get("/api/v1/books", params={"page": huge_page})

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()

    def test_page_at_limit_is_forwarded(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page(page=1_000_000))

        response = client.get("/api/v1/books", params={"page": 1_000_000})

        assert response.status_code == 200
        stub_dispatcher.send.assert_awaited_once_with(ListBooks(page=1_000_000))

    def test_empty_catalog(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page())

        response = client.get("/api/v1/books")

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["total_pages"] == 0

    def test_response_carries_trace_id(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page())

        response = client.get("/api/v1/books", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"

    def test_malformed_trace_id_is_replaced(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page())

        response = client.get("/api/v1/books", headers={"X-Trace-Id": "x" * 200})

        trace_id = response.headers["X-Trace-Id"]
        assert trace_id != "x" * 200
        assert len(trace_id) == 36

    def test_validation_failure_is_problem_details(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PAGE_SIZE,
                message="Page size must be at least 1",
                field="page_size",
            )
        )

        response = client.get("/api/v1/books")

        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["type"].endswith("/errors/invalid_page_size")
        assert data["errors"][0]["field"] == "page_size"


@pytest.mark.api
class TestSearchBooks:
    def test_search_forwards_name(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=make_page(make_view()))

        response = client.get("/api/v1/books/search", params={"name": "Dun", "page": 2})

        assert response.status_code == 200
        stub_dispatcher.send.assert_awaited_once_with(ListBooksByName(name="Dun", page=2))

    def test_name_is_required(self, client, stub_dispatcher):
        response = client.get("/api/v1/books/search")

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()


@pytest.mark.api
class TestAddBook:
    payload = {
        "name": "Dune",
        "price": "20",
        "author_name": "Frank",
        "author_surname": "Herbert",
        "category_name": "Sci-Fi",
    }

    def test_created_returns_id(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = Success(value=book_id)

        response = client.post("/api/v1/books", json=self.payload)

        assert response.status_code == 201
        assert response.json() == {"id": str(book_id)}
        stub_dispatcher.send.assert_awaited_once_with(
            AddBook(
                name="Dune",
                price=Decimal("20"),
                author_name="Frank",
                author_surname="Herbert",
                category_name="Sci-Fi",
            )
        )

    def test_duplicate_returns_409(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Failure(
            error=ConflictError(
                code=ErrorCode.BOOK_ALREADY_EXISTS,
                message="Book already exists",
                resource_type="Book",
                conflicting_field="name",
            )
        )

        response = client.post("/api/v1/books", json=self.payload)

        assert response.status_code == 409
        data = response.json()
        assert data["title"] == "Resource Conflict"
        assert data["detail"] == "Book already exists"
        assert data["instance"] == "/api/v1/books"
        assert data["trace_id"] == response.headers["X-Trace-Id"]

    def test_negative_price_rejected(self, client, stub_dispatcher):
        response = client.post("/api/v1/books", json={**self.payload, "price": "-1"})

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("name", "x" * 256),
            ("author_name", "x" * 101),
            ("author_surname", "x" * 101),
            ("category_name", "x" * 101),
            ("price", "100000000"),
        ],
    )
    def test_values_beyond_column_bounds_rejected(
        self, client, stub_dispatcher, field, value
    ):
        response = client.post("/api/v1/books", json={**self.payload, field: value})

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()

    def test_values_at_column_bounds_accepted(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=uuid7())
        payload = {
            "name": "x" * 255,
            "price": "99999999.99",
            "author_name": "y" * 100,
            "author_surname": "z" * 100,
            "category_name": "c" * 100,
        }

        response = client.post("/api/v1/books", json=payload)

        assert response.status_code == 201

    def test_surname_is_optional(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=uuid7())
        payload = {k: v for k, v in self.payload.items() if k != "author_surname"}

        response = client.post("/api/v1/books", json=payload)

        assert response.status_code == 201
        command = stub_dispatcher.send.await_args.args[0]
        assert command.author_surname is None


def book_not_found(book_id) -> Failure:
    return Failure(
        error=NotFoundError(
            code=ErrorCode.BOOK_NOT_FOUND,
            message="Book not found",
            resource_type="Book",
            resource_id=str(book_id),
        )
    )


@pytest.mark.api
class TestUpdateBook:
    payload = TestAddBook.payload

    def test_updated_returns_204(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = Success(value=None)

        response = client.put(f"/api/v1/books/{book_id}", json=self.payload)

        assert response.status_code == 204
        assert response.content == b""
        stub_dispatcher.send.assert_awaited_once_with(
            UpdateBook(
                book_id=book_id,
                name="Dune",
                price=Decimal("20"),
                author_name="Frank",
                author_surname="Herbert",
                category_name="Sci-Fi",
            )
        )

    def test_unknown_book_returns_404(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = book_not_found(book_id)

        response = client.put(f"/api/v1/books/{book_id}", json=self.payload)

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/book_not_found")

    def test_taken_name_returns_409(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Failure(
            error=ConflictError(
                code=ErrorCode.BOOK_ALREADY_EXISTS,
                message="Book already exists",
                resource_type="Book",
                conflicting_field="name",
            )
        )

        response = client.put(f"/api/v1/books/{uuid7()}", json=self.payload)

        assert response.status_code == 409

    def test_oversized_name_rejected(self, client, stub_dispatcher):
        response = client.put(
            f"/api/v1/books/{uuid7()}", json={**self.payload, "name": "x" * 256}
        )

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()


@pytest.mark.api
class TestSetBookSale:
    def test_sale_returns_204(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = Success(value=None)

        response = client.put(
            f"/api/v1/books/{book_id}/sale",
            json={"sale": True, "sale_price": "7.99"},
        )

        assert response.status_code == 204
        stub_dispatcher.send.assert_awaited_once_with(
            SetBookSale(book_id=book_id, sale_price=Decimal("7.99"), sale=True)
        )

    def test_sale_price_is_optional_when_ending_sale(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Success(value=None)

        response = client.put(f"/api/v1/books/{uuid7()}/sale", json={"sale": False})

        assert response.status_code == 204
        command = stub_dispatcher.send.await_args.args[0]
        assert command.sale_price is None

    def test_missing_sale_price_returns_400(self, client, stub_dispatcher):
        stub_dispatcher.send.return_value = Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="Sale price is required while the book is on sale",
                field="sale_price",
            )
        )

        response = client.put(f"/api/v1/books/{uuid7()}/sale", json={"sale": True})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "sale_price"

    @pytest.mark.parametrize("sale_price", ["-1", "100000000"])
    def test_out_of_range_sale_price_rejected(
        self, client, stub_dispatcher, sale_price
    ):
        response = client.put(
            f"/api/v1/books/{uuid7()}/sale",
            json={"sale": True, "sale_price": sale_price},
        )

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()

    def test_unknown_book_returns_404(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = book_not_found(book_id)

        response = client.put(
            f"/api/v1/books/{book_id}/sale",
            json={"sale": True, "sale_price": "1"},
        )

        assert response.status_code == 404


@pytest.mark.api
class TestDeleteBook:
    def test_deleted_returns_204(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = Success(value=None)

        response = client.delete(f"/api/v1/books/{book_id}")

        assert response.status_code == 204
        stub_dispatcher.send.assert_awaited_once_with(DeleteBook(book_id=book_id))

    def test_unknown_book_returns_404(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = book_not_found(book_id)

        response = client.delete(f"/api/v1/books/{book_id}")

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"


@pytest.mark.api
class TestRateBook:
    def test_rating_saved(self, client, stub_dispatcher):
        book_id, user_id, rating_id = uuid7(), uuid7(), uuid7()
        stub_dispatcher.send.return_value = Success(value=rating_id)

        response = client.post(
            f"/api/v1/books/{book_id}/ratings",
            json={"user_id": str(user_id), "stars": 5},
        )

        assert response.status_code == 201
        assert response.json() == {"id": str(rating_id)}
        stub_dispatcher.send.assert_awaited_once_with(
            AddRating(user_id=user_id, book_id=book_id, stars=5)
        )

    @pytest.mark.parametrize("stars", [0, 6])
    def test_out_of_range_stars_rejected(self, client, stub_dispatcher, stars):
        response = client.post(
            f"/api/v1/books/{uuid7()}/ratings",
            json={"user_id": str(uuid7()), "stars": stars},
        )

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()

    def test_unknown_book_returns_404(self, client, stub_dispatcher):
        book_id = uuid7()
        stub_dispatcher.send.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.BOOK_NOT_FOUND,
                message="Book not found",
                resource_type="Book",
                resource_id=str(book_id),
            )
        )

        response = client.post(
            f"/api/v1/books/{book_id}/ratings",
            json={"user_id": str(uuid7()), "stars": 3},
        )

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"


# =============================================================================
# Categories
# =============================================================================


@pytest.mark.api
class TestCategories:
    def test_list_categories(self, client, stub_dispatcher):
        fantasy = Category(id=uuid7(), name="Fantasy")
        stub_dispatcher.send.return_value = Success(value=[fantasy])

        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        assert response.json() == [{"id": str(fantasy.id), "name": "Fantasy"}]
        stub_dispatcher.send.assert_awaited_once_with(ListCategories())

    def test_category_books(self, client, stub_dispatcher):
        category_id = uuid7()
        stub_dispatcher.send.return_value = Success(value=make_page(make_view()))

        response = client.get(f"/api/v1/categories/{category_id}/books")

        assert response.status_code == 200
        assert response.json()["item_count"] == 1
        stub_dispatcher.send.assert_awaited_once_with(
            ListBooksByCategory(category_id=category_id, page=1)
        )

    def test_unknown_category_returns_404(self, client, stub_dispatcher):
        category_id = uuid7()
        stub_dispatcher.send.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.CATEGORY_NOT_FOUND,
                message=f"Category on this Id: {category_id} doesn't exists",
                resource_type="Category",
                resource_id=str(category_id),
            )
        )

        response = client.get(f"/api/v1/categories/{category_id}/books")

        assert response.status_code == 404
        data = response.json()
        assert data["type"].endswith("/errors/category_not_found")
        assert str(category_id) in data["detail"]

    def test_malformed_category_id_rejected(self, client, stub_dispatcher):
        response = client.get("/api/v1/categories/not-a-uuid/books")

        assert response.status_code == 422

    def test_category_page_above_limit_rejected(self, client, stub_dispatcher):
        response = client.get(
            f"/api/v1/categories/{uuid7()}/books", params={"page": 1_000_001}
        )

        assert response.status_code == 422
        stub_dispatcher.send.assert_not_awaited()
