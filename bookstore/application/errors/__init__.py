"""Application layer errors."""

from bookstore.application.errors.dispatch_errors import HandlerNotRegisteredError
from bookstore.application.errors.notification_errors import (
    MailNotConfirmedError,
    MailNotSentError,
    NotificationError,
    UserNotFoundError,
)

__all__ = [
    "HandlerNotRegisteredError",
    "MailNotConfirmedError",
    "MailNotSentError",
    "NotificationError",
    "UserNotFoundError",
]
