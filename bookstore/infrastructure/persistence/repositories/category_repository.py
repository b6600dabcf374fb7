"""CategoryRepository - SQLAlchemy implementation of CategoryRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from bookstore.domain.entities.category import Category
from bookstore.infrastructure.persistence.models.category import (
    Category as CategoryModel,
)


class CategoryRepository:
    """SQLAlchemy implementation of CategoryRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, category_id: UUID) -> Category | None:
        """Find category by ID.

        Args:
            category_id: Category identifier.

        Returns:
            Domain Category if found, None otherwise.
        """
        category_model = await self.session.get(CategoryModel, category_id)
        if category_model is None:
            return None
        return self._to_domain(category_model)

    async def find_or_build(self, name: str) -> Category:
        """Return the stored category with this name or build an unpersisted one."""
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await self.session.execute(stmt)
        category_model = result.scalar_one_or_none()
        if category_model is None:
            return Category(id=uuid7(), name=name)
        return self._to_domain(category_model)

    async def list_all(self) -> list[Category]:
        """All categories ordered by name."""
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, category_model: CategoryModel) -> Category:
        return Category(id=category_model.id, name=category_model.name)
