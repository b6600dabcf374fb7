"""structlog-backed implementation of LoggerProtocol.

Rendering depends on the environment:
    development          → colored key=value lines
    testing/ci/production → one JSON object per line

Request-scoped fields bound through ``structlog.contextvars`` (the trace ID
set by TraceMiddleware) are merged into every event.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_structlog(*, use_json: bool, level: str) -> None:
    """Install the process-wide structlog pipeline.

    Args:
        use_json: Render JSON instead of the development console format.
        level: Minimum level name, e.g. "INFO".
    """
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


class ConsoleAdapter:
    """LoggerProtocol adapter writing structured events to stdout.

    Example:
        >>> logger = ConsoleAdapter(use_json=True, level="DEBUG")
        >>> logger.info("book_added", book_id="0190...")
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        logger: structlog.typing.FilteringBoundLogger | None = None,
    ) -> None:
        if logger is None:
            configure_structlog(use_json=use_json, level=level)
            logger = structlog.get_logger()
        self._logger = logger

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context.setdefault("error_type", type(error).__name__)
            context.setdefault("error_message", str(error))
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        return ConsoleAdapter(logger=self._logger.bind(**context))
