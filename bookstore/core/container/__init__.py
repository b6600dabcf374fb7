"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from bookstore.core.container import get_dispatcher, get_logger, ...

- infrastructure: Core services (db, logging, tokens, email)
- events: Event bus and subscriptions
- dispatcher: Command/query dispatcher
- handler_factory: Handler auto-wiring
"""

from bookstore.core.container.dispatcher import get_dispatcher
from bookstore.core.container.events import get_event_bus
from bookstore.core.container.handler_factory import create_handler
from bookstore.core.container.infrastructure import (
    get_database,
    get_email_sender,
    get_logger,
    get_token_generator,
    user_repository_scope,
)

__all__ = [
    "create_handler",
    "get_database",
    "get_dispatcher",
    "get_email_sender",
    "get_event_bus",
    "get_logger",
    "get_token_generator",
    "user_repository_scope",
]
