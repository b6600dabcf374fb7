"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Suitable for
single-process deployments.

Architecture:
    - Dictionary-based handler registry (event_type → ordered list of handlers)
    - Concurrent handler execution (asyncio.gather)
    - Every handler runs to completion; failures are logged, then the first
      one (in subscription order) is raised to the publisher
    - Fan-out bounded by asyncio.timeout
    - Optional background delivery through a single-worker queue, which
      preserves publish order

Usage:
    >>> bus = InMemoryEventBus(logger=logger, publish_timeout=30.0)
    >>> bus.subscribe(UserCreated, confirmation_handler.handle)
    >>> await bus.publish(UserCreated(username="alice", base_url=url))
"""

import asyncio
import contextlib
from collections import defaultdict

from bookstore.domain.events.base_event import DomainEvent
from bookstore.domain.protocols.event_bus_protocol import EventHandler
from bookstore.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-loud fan-out.

    Thread Safety:
        NOT thread-safe (single event loop design).

    Attributes:
        _handlers: Mapping of event class to its subscribers, in
            registration order.
        _logger: Logger for publishing and handler failures.
        _publish_timeout: Seconds a synchronous publish may take (None = no bound).
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        publish_timeout: float | None = None,
    ) -> None:
        """Initialize event bus.

        Args:
            logger: Logger for handler failures and event publishing.
            publish_timeout: Upper bound in seconds for one publish call.
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger
        self._publish_timeout = publish_timeout
        self._queue: asyncio.Queue[DomainEvent] | None = None
        self._worker: asyncio.Task[None] | None = None

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for an exact event type.

        Args:
            event_type: Class of event to handle (no inheritance matching).
            handler: Async callable invoked with the event.
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        """Subscribers registered for an event type, in registration order."""
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers and wait for them.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log every handler failure (warning level)
            5. Raise the first failure in registration order

        Args:
            event: Domain event to publish.

        Raises:
            Exception: First handler failure, after all handlers finished.
            TimeoutError: If fan-out exceeds publish_timeout.
        """
        event_type = type(event)
        handlers = self.handlers_for(event_type)

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        async with asyncio.timeout(self._publish_timeout):
            results = await asyncio.gather(
                *(handler(event) for handler in handlers),
                return_exceptions=True,
            )

        first_failure: BaseException | None = None
        for handler, result in zip(handlers, results):
            if isinstance(result, BaseException):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
                if first_failure is None:
                    first_failure = result

        if first_failure is not None:
            raise first_failure

    async def publish_later(self, event: DomainEvent) -> None:
        """Queue event for background delivery.

        For callers outside the HTTP routes, such as background jobs and
        maintenance scripts, that must not wait for subscribers. Routes
        publish synchronously so mail failures reach the response.

        Raises:
            RuntimeError: If the background worker has not been started.
        """
        if self._queue is None:
            raise RuntimeError("Event bus worker is not running; call start() first")
        await self._queue.put(event)

    @property
    def is_running(self) -> bool:
        return self._worker is not None

    def start(self) -> None:
        """Start the background delivery worker (idempotent)."""
        if self._worker is not None:
            return
        self._queue = asyncio.Queue()
        self._worker = asyncio.create_task(
            self._drain(self._queue), name="event-bus-worker"
        )

    async def stop(self) -> None:
        """Deliver queued events, then stop the background worker."""
        if self._worker is None or self._queue is None:
            return
        await self._queue.join()
        self._worker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._worker
        self._worker = None
        self._queue = None

    async def _drain(self, queue: asyncio.Queue[DomainEvent]) -> None:
        while True:
            event = await queue.get()
            try:
                await self.publish(event)
            except Exception as exc:
                # Background failures have no caller to raise to.
                self._logger.error(
                    "event_delivery_failed",
                    error=exc,
                    event_type=type(event).__name__,
                    event_id=str(event.event_id),
                )
            finally:
                queue.task_done()


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
