"""ListCategories query handler."""

from bookstore.application.queries.book_queries import ListCategories
from bookstore.core.errors import DomainError
from bookstore.core.result import Result, Success
from bookstore.domain.entities.category import Category
from bookstore.domain.protocols.category_repository import CategoryRepository


class ListCategoriesHandler:
    """Return every category ordered by name."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(self, query: ListCategories) -> Result[list[Category], DomainError]:
        categories = await self._category_repo.list_all()
        return Success(value=categories)
