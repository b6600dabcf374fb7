"""Domain events."""

from bookstore.domain.events.account_events import PasswordResetRequested, UserCreated
from bookstore.domain.events.base_event import DomainEvent

__all__ = [
    "DomainEvent",
    "PasswordResetRequested",
    "UserCreated",
]
