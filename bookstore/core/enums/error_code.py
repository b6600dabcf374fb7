"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Notification errors (MAIL_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_PAGE_NUMBER = "invalid_page_number"
    INVALID_PAGE_SIZE = "invalid_page_size"
    UNORDERED_SOURCE = "unordered_source"
    INVALID_RATING = "invalid_rating"

    # Resource errors
    BOOK_NOT_FOUND = "book_not_found"
    USER_NOT_FOUND = "user_not_found"
    CATEGORY_NOT_FOUND = "category_not_found"

    # Conflict errors
    BOOK_ALREADY_EXISTS = "book_already_exists"

    # Notification errors
    MAIL_NOT_SENT = "mail_not_sent"
    MAIL_NOT_CONFIRMED = "mail_not_confirmed"
