"""Stub email sender for development and testing.

Logs every message instead of delivering it. The callback link is part of
the body, so developers can follow it from the console.
"""

from bookstore.core.result import Result, Success
from bookstore.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailSender:
    """EmailSenderProtocol implementation that only logs."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send(self, to: str, subject: str, html_body: str) -> Result[None, str]:
        self._logger.info(
            "email_sent_stub",
            to=to,
            subject=subject,
            body=html_body,
        )
        return Success(value=None)
