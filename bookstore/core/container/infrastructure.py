"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Logging (structlog console)
- Token generation (JWT)
- Email (stub/SMTP)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING


from bookstore.core.config import settings
from bookstore.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from bookstore.domain.protocols.email_sender_protocol import EmailSenderProtocol
    from bookstore.domain.protocols.logger_protocol import LoggerProtocol
    from bookstore.domain.protocols.token_generator_protocol import (
        TokenGeneratorProtocol,
    )
    from bookstore.domain.protocols.user_repository import UserRepository


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    The Dispatcher opens one session per request from it.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from bookstore.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_token_generator() -> "TokenGeneratorProtocol":
    """Get token generator singleton (app-scoped).

    Returns JWTTokenGenerator with lifetimes taken from settings.
    """
    from bookstore.infrastructure.security.jwt_token_generator import (
        JWTTokenGenerator,
    )

    return JWTTokenGenerator(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        confirmation_ttl=timedelta(hours=settings.confirmation_token_expire_hours),
        password_reset_ttl=timedelta(
            minutes=settings.password_reset_token_expire_minutes
        ),
    )


@lru_cache()
def get_email_sender() -> "EmailSenderProtocol":
    """Get email sender singleton (app-scoped).

    Backend chosen by EMAIL_BACKEND:
        - 'stub': StubEmailSender (logs only, development/testing)
        - 'smtp': SMTPEmailSender
    """
    if settings.email_backend == "smtp":
        from bookstore.infrastructure.email.smtp_email_sender import SMTPEmailSender

        return SMTPEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.email_from,
            logger=get_logger(),
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )

    from bookstore.infrastructure.email.stub_email_sender import StubEmailSender

    return StubEmailSender(logger=get_logger())


# ============================================================================
# Event-Handler Scopes
# ============================================================================


@asynccontextmanager
async def user_repository_scope() -> AsyncIterator["UserRepository"]:
    """Open a short-lived session and yield a UserRepository bound to it.

    Event handlers run outside any request session, so each lookup gets
    its own.
    """
    from bookstore.infrastructure.persistence.repositories import UserRepository

    async with get_database().get_session() as session:
        yield UserRepository(session=session)
