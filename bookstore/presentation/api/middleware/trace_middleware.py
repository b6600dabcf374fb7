"""Request correlation via X-Trace-Id.

Every request runs with a trace ID: the caller's X-Trace-Id when it looks
sane, otherwise a fresh UUID4. The ID is echoed in the response header,
bound into structlog contextvars for every log line of the request, and
copied into ProblemDetails bodies by the error builders.
"""

from __future__ import annotations

import re
from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)

_VALID_TRACE_ID = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def get_trace_id() -> str | None:
    """Trace ID of the current request, or None outside a request."""
    return trace_id_context.get()


def _incoming_or_new(request: Request) -> str:
    candidate = request.headers.get(TRACE_HEADER, "")
    if _VALID_TRACE_ID.fullmatch(candidate):
        return candidate
    return str(uuid4())


class TraceMiddleware(BaseHTTPMiddleware):
    """Assign, propagate and echo the request trace ID."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = _incoming_or_new(request)
        token = trace_id_context.set(trace_id)
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("trace_id")
            trace_id_context.reset(token)
