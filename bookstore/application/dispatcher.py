"""Command/query dispatcher.

Routes each command or query to the single handler registered for its
class in the CQRS registry. Every ``send`` runs in its own database session;
the handler is built for that session and awaited under a time bound.

Flow (send):
    1. Resolve handler class by type(request)
    2. Open session (commits on success, rolls back on error/cancel)
    3. Build handler for the session (auto-wired)
    4. Await handler.handle(request) under asyncio.timeout
    5. Return the handler's Result unchanged

Events go through ``publish`` / ``publish_later`` and are handed to the
event bus as-is.

Usage:
    >>> dispatcher = get_dispatcher()
    >>> result = await dispatcher.send(ListBooks(page=2))
    >>> await dispatcher.publish(UserCreated(username="alice", base_url=url))
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.cqrs.registry import get_handler_class
from bookstore.application.errors.dispatch_errors import HandlerNotRegisteredError
from bookstore.domain.events.base_event import DomainEvent
from bookstore.domain.protocols.event_bus_protocol import EventBusProtocol
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.infrastructure.persistence.database import Database

HandlerBuilder = Callable[[type, AsyncSession], Awaitable[Any]]


class Dispatcher:
    """Single entry point for commands, queries and events.

    Attributes:
        _database: Source of per-request sessions.
        _event_bus: Event fan-out.
        _logger: Structured logger.
        _handler_builder: Builds a handler instance bound to a session.
        _request_timeout: Seconds one send may take (None = no bound).
    """

    def __init__(
        self,
        database: Database,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        *,
        handler_builder: HandlerBuilder,
        request_timeout: float | None = None,
    ) -> None:
        self._database = database
        self._event_bus = event_bus
        self._logger = logger
        self._handler_builder = handler_builder
        self._request_timeout = request_timeout

    async def send(self, request: Any) -> Any:
        """Dispatch a command or query to its handler.

        Args:
            request: Command or query dataclass instance.

        Returns:
            Result returned by the handler.

        Raises:
            HandlerNotRegisteredError: If no handler is registered for the
                request class.
            TimeoutError: If the handler exceeds the request timeout.
        """
        request_type = type(request)
        handler_class = get_handler_class(request_type)
        if handler_class is None:
            raise HandlerNotRegisteredError(request_type)

        self._logger.debug(
            "request_dispatching",
            request_type=request_type.__name__,
            handler=handler_class.__name__,
        )

        async with self._database.get_session() as session:
            async with asyncio.timeout(self._request_timeout):
                handler = await self._handler_builder(handler_class, session)
                return await handler.handle(request)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event and wait for every subscriber.

        Raises:
            Exception: First subscriber failure.
        """
        await self._event_bus.publish(event)

    async def publish_later(self, event: DomainEvent) -> None:
        """Queue event for background delivery."""
        await self._event_bus.publish_later(event)
