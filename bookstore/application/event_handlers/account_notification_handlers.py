"""Account notification handlers.

Subscribers that turn account-lifecycle events into outbound emails with a
security token embedded in a callback link.

Per event: resolve user → generate token → build callback URL → send.

    UserCreated:
        - unknown username: warning logged, nothing sent (registration may
          have been rolled back)
        - empty token or blank base URL: nothing sent
        - transport failure: MailNotSentError
    PasswordResetRequested:
        - unknown email: UserNotFoundError
        - unconfirmed email: MailNotConfirmedError (nothing sent)
        - blank base URL: nothing sent
        - transport failure: MailNotSentError

Usage:
    >>> handler = SendConfirmationEmailHandler(
    ...     users=user_repository_scope,
    ...     token_generator=get_token_generator(),
    ...     email_sender=get_email_sender(),
    ...     logger=get_logger(),
    ... )
    >>> event_bus.subscribe(UserCreated, handler.handle)
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from urllib.parse import quote

from bookstore.application.errors.notification_errors import (
    MailNotConfirmedError,
    MailNotSentError,
    UserNotFoundError,
)
from bookstore.core.result import Failure
from bookstore.domain.entities.user import User
from bookstore.domain.events.account_events import PasswordResetRequested, UserCreated
from bookstore.domain.protocols.email_sender_protocol import EmailSenderProtocol
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.token_generator_protocol import (
    TokenGeneratorProtocol,
    TokenPurpose,
)
from bookstore.domain.protocols.user_repository import UserRepository

UserRepositoryScope = Callable[[], AbstractAsyncContextManager[UserRepository]]
"""Opens a short-lived session and yields a UserRepository bound to it."""

CONFIRM_EMAIL_PATH = "/api/Account/confirm-email"
RESET_PASSWORD_PATH = "/api/Account/reset-password-token"


def _normalize_base_url(base_url: str) -> str:
    return base_url.strip().rstrip("/")


def _link(callback_url: str) -> str:
    return f"<a href='{callback_url}'>clicking here</a>"


class _AccountEmailHandler:
    """Shared dependencies and send step for account emails.

    Attributes:
        _users: Factory for a session-scoped UserRepository.
        _token_generator: Issues confirmation and reset tokens.
        _email_sender: Outbound email transport.
        _logger: Structured logger.
    """

    def __init__(
        self,
        users: UserRepositoryScope,
        token_generator: TokenGeneratorProtocol,
        email_sender: EmailSenderProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._users = users
        self._token_generator = token_generator
        self._email_sender = email_sender
        self._logger = logger

    async def _send(
        self, user: User, *, subject: str, html_body: str, failure_prefix: str
    ) -> None:
        result = await self._email_sender.send(user.email, subject, html_body)
        if isinstance(result, Failure):
            raise MailNotSentError(f"{failure_prefix}: {result.error}")


class SendConfirmationEmailHandler(_AccountEmailHandler):
    """Send the email-confirmation link after a user is created."""

    async def handle(self, event: UserCreated) -> None:
        """Send the confirmation email for a newly created user.

        Args:
            event: UserCreated event.

        Raises:
            MailNotSentError: If the email transport rejects the message.
        """
        async with self._users() as user_repo:
            user = await user_repo.find_by_username(event.username)

        if user is None:
            self._logger.warning(
                "confirmation_user_not_found",
                username=event.username,
                event_id=str(event.event_id),
            )
            return

        token = self._token_generator.generate(TokenPurpose.CONFIRMATION, user)
        if not token:
            self._logger.warning(
                "confirmation_token_empty",
                user_id=str(user.id),
                event_id=str(event.event_id),
            )
            return

        base_url = _normalize_base_url(event.base_url)
        if not base_url:
            self._logger.warning(
                "confirmation_base_url_missing",
                user_id=str(user.id),
                event_id=str(event.event_id),
            )
            return

        callback_url = (
            f"{base_url}{CONFIRM_EMAIL_PATH}"
            f"?userId={user.id}&token={quote(token, safe='')}"
        )
        await self._send(
            user,
            subject="Confirm your email",
            html_body=f"Please confirm your account by {_link(callback_url)}.",
            failure_prefix="Sending Confirmation mail failed",
        )
        self._logger.info(
            "confirmation_email_sent",
            user_id=str(user.id),
            event_id=str(event.event_id),
        )


class SendPasswordResetEmailHandler(_AccountEmailHandler):
    """Send the password-reset link to a user with a confirmed email."""

    async def handle(self, event: PasswordResetRequested) -> None:
        """Send the password reset email.

        Args:
            event: PasswordResetRequested event.

        Raises:
            UserNotFoundError: If no user has this email.
            MailNotConfirmedError: If the user's email is not confirmed.
            MailNotSentError: If the email transport rejects the message.
        """
        async with self._users() as user_repo:
            user = await user_repo.find_by_email(event.email)

        if user is None:
            raise UserNotFoundError(event.email)

        if not user.email_confirmed:
            raise MailNotConfirmedError()

        token = self._token_generator.generate(TokenPurpose.PASSWORD_RESET, user)

        base_url = _normalize_base_url(event.base_url)
        if not base_url:
            self._logger.warning(
                "password_reset_base_url_missing",
                user_id=str(user.id),
                event_id=str(event.event_id),
            )
            return

        callback_url = (
            f"{base_url}{RESET_PASSWORD_PATH}"
            f"?token={quote(token, safe='')}&email={quote(user.email, safe='')}"
        )
        await self._send(
            user,
            subject="Reset Password",
            html_body=f"Please reset your password by {_link(callback_url)}.",
            failure_prefix="Sending mail failed",
        )
        self._logger.info(
            "password_reset_email_sent",
            user_id=str(user.id),
            event_id=str(event.event_id),
        )
