"""Dispatcher dependency factory."""

from functools import lru_cache

from bookstore.application.dispatcher import Dispatcher


@lru_cache()
def get_dispatcher() -> Dispatcher:
    """Get dispatcher singleton (app-scoped).

    Usage:
        # Presentation Layer (FastAPI Depends)
        dispatcher: Dispatcher = Depends(get_dispatcher)
    """
    from bookstore.core.config import get_settings
    from bookstore.core.container.events import get_event_bus
    from bookstore.core.container.handler_factory import create_handler
    from bookstore.core.container.infrastructure import get_database, get_logger

    return Dispatcher(
        database=get_database(),
        event_bus=get_event_bus(),
        logger=get_logger(),
        handler_builder=create_handler,
        request_timeout=get_settings().request_timeout_seconds,
    )
