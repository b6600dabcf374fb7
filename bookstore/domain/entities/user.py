"""User domain entity.

Users are owned by the identity provider. The catalog only reads them:
ratings reference a user, and account notifications look users up by
username or email.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class User:
    """Read-only view of an identity-provider user.

    Attributes:
        id: Unique user identifier.
        username: Login name.
        email: Email address.
        email_confirmed: Whether the email address has been confirmed.
    """

    id: UUID
    username: str
    email: str
    email_confirmed: bool = False
