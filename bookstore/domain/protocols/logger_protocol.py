"""LoggerProtocol: structured logging port.

Events are snake_case names with key-value context, never interpolated
strings. Tokens and email bodies must not be passed as context outside the
stub email sender.

Usage:
    logger.info("book_added", book_id=str(book_id))
    logger.error("book_add_failed", error=exc, book_name=name)

    request_logger = logger.bind(book_id=str(book_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Port implemented by logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception that caused the failure; adapters record its
                type and message.
            **context: Structured context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event."""
        ...
