"""Rating domain entity."""

from dataclasses import dataclass
from uuid import UUID

MIN_STARS = 1
MAX_STARS = 5


@dataclass
class Rating:
    """A user's star rating for a book.

    At most one Rating exists per (user_id, book_id); a second submission
    updates ``stars`` in place.

    Attributes:
        id: Unique rating identifier.
        user_id: Rating author.
        book_id: Rated book.
        stars: Star value between MIN_STARS and MAX_STARS.
    """

    id: UUID
    user_id: UUID
    book_id: UUID
    stars: int

    def __post_init__(self) -> None:
        """Validate star range."""
        validate_stars(self.stars)

    def change_stars(self, stars: int) -> None:
        """Replace the star value."""
        validate_stars(stars)
        self.stars = stars


def validate_stars(stars: int) -> None:
    """Raise ValueError if stars is outside the allowed scale.

    Raises:
        ValueError: If stars is not between MIN_STARS and MAX_STARS.
    """
    if not MIN_STARS <= stars <= MAX_STARS:
        raise ValueError(f"stars must be between {MIN_STARS} and {MAX_STARS}")
