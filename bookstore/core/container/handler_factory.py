"""Handler factory: build handlers from their constructor annotations.

Each constructor parameter is resolved by its annotated type:

    BookRepository, AuthorRepository, ...  → SQLAlchemy repository on the session
    UnitOfWork                             → SQLAlchemyUnitOfWork on the session
    LoggerProtocol, EventBusProtocol, ...  → container singleton
    Settings                               → cached settings

Optional parameters with no provider receive None. Anything else is a
wiring bug and raises ValueError.

Usage:
    async with database.get_session() as session:
        handler = await create_handler(AddBookHandler, session)
        result = await handler.handle(command)
"""

from collections.abc import Callable
from dataclasses import dataclass
from types import NoneType
from typing import Any, TypeVar, get_args, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class HandlerDependency:
    """One constructor parameter of a handler."""

    name: str
    annotation: Any
    optional: bool


def handler_dependencies(handler_class: type) -> list[HandlerDependency]:
    """List constructor parameters with ``X | None`` unwrapped to ``X``."""
    hints = get_type_hints(handler_class.__init__)
    hints.pop("return", None)

    dependencies = []
    for name, annotation in hints.items():
        args = get_args(annotation)
        optional = NoneType in args
        if optional:
            annotation = next(arg for arg in args if arg is not NoneType)
        dependencies.append(HandlerDependency(name, annotation, optional))
    return dependencies


def session_providers() -> dict[type, Callable[..., Any]]:
    """Ports that live for one request session, keyed by protocol type."""
    from bookstore.domain import protocols
    from bookstore.infrastructure.persistence import repositories
    from bookstore.infrastructure.persistence.unit_of_work import SQLAlchemyUnitOfWork

    return {
        protocols.BookRepository: repositories.BookRepository,
        protocols.AuthorRepository: repositories.AuthorRepository,
        protocols.CategoryRepository: repositories.CategoryRepository,
        protocols.RatingRepository: repositories.RatingRepository,
        protocols.UserRepository: repositories.UserRepository,
        protocols.UnitOfWork: SQLAlchemyUnitOfWork,
    }


def singleton_providers() -> dict[type, Callable[[], Any]]:
    """App-scoped dependencies, keyed by type."""
    from bookstore.core.config import Settings, get_settings
    from bookstore.core.container.events import get_event_bus
    from bookstore.core.container.infrastructure import (
        get_email_sender,
        get_logger,
        get_token_generator,
    )
    from bookstore.domain import protocols

    return {
        protocols.EventBusProtocol: get_event_bus,
        protocols.LoggerProtocol: get_logger,
        protocols.TokenGeneratorProtocol: get_token_generator,
        protocols.EmailSenderProtocol: get_email_sender,
        Settings: get_settings,
    }


async def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Instantiate a handler for one request session.

    Args:
        handler_class: Handler class to instantiate.
        session: Session shared by every repository and the unit of work.
        **overrides: Explicit values by parameter name (tests, one-off wiring).

    Returns:
        Handler instance.

    Raises:
        ValueError: If a required parameter has no provider.
    """
    per_session = session_providers()
    singletons = singleton_providers()
    kwargs: dict[str, Any] = {}

    for dep in handler_dependencies(handler_class):
        if dep.name in overrides:
            kwargs[dep.name] = overrides[dep.name]
        elif dep.annotation in per_session:
            kwargs[dep.name] = per_session[dep.annotation](session=session)
        elif dep.annotation in singletons:
            kwargs[dep.name] = singletons[dep.annotation]()
        elif dep.optional:
            kwargs[dep.name] = None
        else:
            raise ValueError(
                f"Cannot resolve dependency '{dep.name}' of type "
                f"{getattr(dep.annotation, '__name__', dep.annotation)!r} "
                f"for {handler_class.__name__}"
            )

    return handler_class(**kwargs)
