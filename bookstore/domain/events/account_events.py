"""Account-lifecycle domain events.

Published by the presentation layer after the identity provider has
accepted a registration or a password reset request. Each event carries
the public base URL of the request so notification handlers can build
absolute callback links.

Handlers:
- SendConfirmationEmailHandler: UserCreated
- SendPasswordResetEmailHandler: PasswordResetRequested
"""

from dataclasses import dataclass

from bookstore.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    """A user account was created and needs email confirmation.

    Attributes:
        username: Login name of the new user.
        base_url: Public base URL (scheme://host) for callback links.
    """

    username: str
    base_url: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested(DomainEvent):
    """A user asked for a password reset link.

    Attributes:
        email: Email address the reset was requested for.
        base_url: Public base URL (scheme://host) for callback links.
    """

    email: str
    base_url: str
