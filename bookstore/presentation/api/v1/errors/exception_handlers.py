"""Global exception handlers for FastAPI application.

Converts raised exceptions into RFC 7807 Problem Details responses.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bookstore.application.errors import NotificationError
from bookstore.core.config import settings
from bookstore.core.container import get_logger
from bookstore.presentation.api.middleware.trace_middleware import get_trace_id
from bookstore.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from bookstore.presentation.api.v1.errors.problem_details import ProblemDetails


async def notification_exception_handler(
    request: Request, exc: NotificationError
) -> JSONResponse:
    """Handle failures raised by notification event handlers.

    The carried DomainError decides the status (404, 400 or 502).
    """
    get_logger().warning(
        "notification_failed",
        error_code=exc.error.code.value,
        error_message=exc.error.message,
        request_path=request.url.path,
    )
    return ErrorResponseBuilder.from_domain_error(
        error=exc.error,
        request=request,
        trace_id=get_trace_id() or "",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Converts any unhandled exception into RFC 7807 Problem Details response
    without leaking internal details to API consumers.
    """
    trace_id = get_trace_id()

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    get_logger().error(
        "unhandled_exception",
        error=exc,
        exc_type=type(exc).__name__,
        request_path=request.url.path,
        request_method=request.method,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(NotificationError, notification_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
