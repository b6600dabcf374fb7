"""SMTP email sender.

Delivers HTML mail through an SMTP relay with the standard library client.
smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
from email.message import EmailMessage

from bookstore.core.result import Failure, Result, Success
from bookstore.domain.protocols.logger_protocol import LoggerProtocol


class SMTPEmailSender:
    """EmailSenderProtocol implementation over SMTP.

    Transport errors become Failure(reason); they are never retried here.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        logger: LoggerProtocol,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        """Initialize SMTP sender.

        Args:
            host: SMTP relay host.
            port: SMTP relay port.
            sender: From address.
            logger: Logger for delivery failures.
            username: Optional login.
            password: Optional password.
            use_tls: Issue STARTTLS before login.
            timeout: Socket timeout in seconds.
        """
        self._host = host
        self._port = port
        self._sender = sender
        self._logger = logger
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    async def send(self, to: str, subject: str, html_body: str) -> Result[None, str]:
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            self._logger.error("smtp_send_failed", error=exc, to=to, subject=subject)
            return Failure(error=str(exc))
        return Success(value=None)

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as client:
            if self._use_tls:
                client.starttls()
            if self._username and self._password:
                client.login(self._username, self._password)
            client.send_message(message)
