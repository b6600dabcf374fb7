"""Notification handler errors.

Notification handlers run as event subscribers, not behind a Result-based
caller, so their failures are raised. Each exception carries a DomainError
so the presentation layer can map it like any other domain failure.

Exports:
    NotificationError: Base class for raised notification failures
    UserNotFoundError: Reset requested for an unknown email
    MailNotConfirmedError: Reset requested for an unconfirmed email
    MailNotSentError: Email transport rejected the message
"""

from bookstore.core.enums import ErrorCode
from bookstore.core.errors import DomainError, NotFoundError, ValidationError


class NotificationError(Exception):
    """Base exception for notification handler failures.

    Attributes:
        error: Domain error describing the failure.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(error.message)
        self.error = error


class UserNotFoundError(NotificationError):
    """No user matches the event's username or email."""

    def __init__(self, lookup: str, message: str = "User not found") -> None:
        super().__init__(
            NotFoundError(
                code=ErrorCode.USER_NOT_FOUND,
                message=message,
                resource_type="User",
                resource_id=lookup,
            )
        )


class MailNotConfirmedError(NotificationError):
    """The user's email address has not been confirmed."""

    def __init__(self, message: str = "Email is not confirmed") -> None:
        super().__init__(
            ValidationError(
                code=ErrorCode.MAIL_NOT_CONFIRMED,
                message=message,
                field="email",
            )
        )


class MailNotSentError(NotificationError):
    """The email transport failed to accept the message."""

    def __init__(self, message: str) -> None:
        super().__init__(DomainError(code=ErrorCode.MAIL_NOT_SENT, message=message))
