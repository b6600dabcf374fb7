"""Email sender protocol.

Implementations:
    - StubEmailSender: logs messages (development/testing)
    - SMTPEmailSender: delivers over SMTP
"""

from typing import Protocol

from bookstore.core.result import Result


class EmailSenderProtocol(Protocol):
    """Outbound email transport."""

    async def send(self, to: str, subject: str, html_body: str) -> Result[None, str]:
        """Send an HTML email.

        Returns:
            Success(None) when the transport accepted the message.
            Failure(reason) when delivery failed.
        """
        ...
