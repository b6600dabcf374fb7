"""Error response builder for RFC 7807 Problem Details.

Builds RFC 7807 responses from domain errors, whether they arrive as a
Failure from a handler or inside a raised NotificationError.

Status mapping:
    ConflictError      → 409
    NotFoundError      → 404
    ValidationError    → 400 (includes MAIL_NOT_CONFIRMED)
    MAIL_NOT_SENT      → 502
    anything else      → 500
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from bookstore.core.config import settings
from bookstore.core.enums import ErrorCode
from bookstore.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from bookstore.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=result.error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert DomainError to RFC 7807 JSON response.

        Args:
            error: Domain error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 7807 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(status_code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _get_status_code(error: DomainError) -> int:
        if error.code is ErrorCode.MAIL_NOT_SENT:
            return status.HTTP_502_BAD_GATEWAY
        if isinstance(error, ConflictError):
            return status.HTTP_409_CONFLICT
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        if isinstance(error, ValidationError):
            return status.HTTP_400_BAD_REQUEST
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def _get_title(status_code: int) -> str:
        mapping = {
            status.HTTP_400_BAD_REQUEST: "Validation Failed",
            status.HTTP_404_NOT_FOUND: "Resource Not Found",
            status.HTTP_409_CONFLICT: "Resource Conflict",
            status.HTTP_502_BAD_GATEWAY: "Mail Delivery Failed",
        }
        return mapping.get(status_code, "Internal Server Error")
