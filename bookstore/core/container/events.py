"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions
are wired once, at construction.

Subscriptions:
    UserCreated              → SendConfirmationEmailHandler
    PasswordResetRequested   → SendPasswordResetEmailHandler
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstore.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with the account notification handlers subscribed.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserCreated(username="alice", base_url=url))
    """
    from bookstore.application.event_handlers.account_notification_handlers import (
        SendConfirmationEmailHandler,
        SendPasswordResetEmailHandler,
    )
    from bookstore.core.config import get_settings
    from bookstore.core.container.infrastructure import (
        get_email_sender,
        get_logger,
        get_token_generator,
        user_repository_scope,
    )
    from bookstore.domain.events.account_events import (
        PasswordResetRequested,
        UserCreated,
    )
    from bookstore.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    settings = get_settings()
    logger = get_logger()

    event_bus = InMemoryEventBus(
        logger=logger,
        publish_timeout=settings.publish_timeout_seconds,
    )

    confirmation_handler = SendConfirmationEmailHandler(
        users=user_repository_scope,
        token_generator=get_token_generator(),
        email_sender=get_email_sender(),
        logger=logger,
    )
    password_reset_handler = SendPasswordResetEmailHandler(
        users=user_repository_scope,
        token_generator=get_token_generator(),
        email_sender=get_email_sender(),
        logger=logger,
    )

    event_bus.subscribe(UserCreated, confirmation_handler.handle)
    event_bus.subscribe(PasswordResetRequested, password_reset_handler.handle)

    return event_bus
