"""User database model.

Rows are written by the identity provider. The catalog reads username,
email and the confirmation flag.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User account row.

    Indexes:
        - username (unique)
        - email (unique)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True, index=True
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    email_confirmed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
