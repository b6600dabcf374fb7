"""RatingRepository - SQLAlchemy implementation of RatingRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.domain.entities.rating import Rating
from bookstore.infrastructure.persistence.models.rating import Rating as RatingModel


class RatingRepository:
    """SQLAlchemy implementation of RatingRepository protocol.

    Changes are staged on the session; the caller's unit of work commits.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, user_id: UUID, book_id: UUID) -> Rating | None:
        """Find the rating a user gave a book.

        Args:
            user_id: Rating author.
            book_id: Rated book.

        Returns:
            Domain Rating if found, None otherwise.
        """
        stmt = select(RatingModel).where(
            RatingModel.user_id == user_id,
            RatingModel.book_id == book_id,
        )
        result = await self.session.execute(stmt)
        rating_model = result.scalar_one_or_none()
        if rating_model is None:
            return None
        return self._to_domain(rating_model)

    async def add(self, rating: Rating) -> None:
        """Stage a new rating.

        Args:
            rating: Domain Rating entity.
        """
        self.session.add(self._to_model(rating))

    async def update(self, rating: Rating) -> None:
        """Stage a star change for an existing rating.

        Raises:
            NoResultFound: If the rating does not exist.
        """
        stmt = select(RatingModel).where(RatingModel.id == rating.id)
        result = await self.session.execute(stmt)
        rating_model = result.scalar_one()
        rating_model.stars = rating.stars

    def _to_domain(self, rating_model: RatingModel) -> Rating:
        return Rating(
            id=rating_model.id,
            user_id=rating_model.user_id,
            book_id=rating_model.book_id,
            stars=rating_model.stars,
        )

    def _to_model(self, rating: Rating) -> RatingModel:
        return RatingModel(
            id=rating.id,
            user_id=rating.user_id,
            book_id=rating.book_id,
            stars=rating.stars,
        )
