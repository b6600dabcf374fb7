"""Event bus protocol (port) for domain events.

Implementations:
    - InMemoryEventBus: bookstore/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserCreated, handler.handle)
    >>> await event_bus.publish(UserCreated(username="alice", base_url=url))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from bookstore.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[Any], Awaitable[None]]
"""Async callable receiving one DomainEvent (or subclass) and returning None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Publisher-Subscriber mediator: an explicit mapping from event type to
    an ordered list of subscribers, registered at startup.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register a handler for an exact event type.

        Args:
            event_type: Event class to handle (no inheritance matching).
            handler: Async callable invoked with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every subscriber and wait for all of them.

        Zero subscribers is a no-op.

        Raises:
            Exception: The first subscriber failure, in registration order,
                after every subscriber has finished.
            TimeoutError: If fan-out exceeds the configured bound.
        """
        ...

    async def publish_later(self, event: DomainEvent) -> None:
        """Queue an event for background delivery.

        Events queued by one producer are delivered in order. Failures are
        logged by the bus instead of raised to the caller.
        """
        ...

    def start(self) -> None:
        """Start background delivery (idempotent)."""
        ...

    async def stop(self) -> None:
        """Deliver queued events, then stop background delivery."""
        ...
