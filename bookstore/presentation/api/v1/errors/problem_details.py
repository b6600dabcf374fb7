"""RFC 7807 response bodies (https://tools.ietf.org/html/rfc7807).

Every non-2xx response of the catalog API that originates from a domain or
notification failure uses ProblemDetails. ``type`` is
``{api_base_url}/errors/{error_code}``; ``errors`` is present only for
field-level validation failures.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One invalid field, e.g. ``page`` with ``invalid_page_number``."""

    field: str
    code: str = Field(..., description="ErrorCode value")
    message: str


class ProblemDetails(BaseModel):
    """RFC 7807 problem body, extended with the request trace ID.

    Example:
        {
            "type": "http://localhost:8000/errors/book_already_exists",
            "title": "Resource Conflict",
            "status": 409,
            "detail": "Book already exists",
            "instance": "/api/v1/books",
            "trace_id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    type: str = Field(..., examples=["http://localhost:8000/errors/category_not_found"])
    title: str
    status: int = Field(..., examples=[404])
    detail: str
    instance: str = Field(..., description="Request path")
    errors: list[ErrorDetail] | None = None
    trace_id: str | None = None
