"""Token generator protocol for account emails."""

from enum import Enum
from typing import Protocol

from bookstore.domain.entities.user import User


class TokenPurpose(str, Enum):
    """What a generated token authorizes."""

    CONFIRMATION = "confirmation"
    PASSWORD_RESET = "password_reset"


class TokenGeneratorProtocol(Protocol):
    """Issues opaque, URL-safe tokens bound to a user and a purpose."""

    def generate(self, purpose: TokenPurpose, user: User) -> str:
        """Generate a token.

        Returns:
            Opaque token string. An empty string means no token could be issued.
        """
        ...
