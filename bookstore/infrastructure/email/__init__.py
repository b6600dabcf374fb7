"""Email sender implementations.

- StubEmailSender: Console logging for development/testing
- SMTPEmailSender: SMTP relay delivery
"""

from bookstore.infrastructure.email.smtp_email_sender import SMTPEmailSender
from bookstore.infrastructure.email.stub_email_sender import StubEmailSender

__all__ = [
    "SMTPEmailSender",
    "StubEmailSender",
]
