"""Event handlers - React to account-lifecycle domain events."""

from bookstore.application.event_handlers.account_notification_handlers import (
    SendConfirmationEmailHandler,
    SendPasswordResetEmailHandler,
    UserRepositoryScope,
)

__all__ = [
    "SendConfirmationEmailHandler",
    "SendPasswordResetEmailHandler",
    "UserRepositoryScope",
]
