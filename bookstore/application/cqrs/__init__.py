"""CQRS registry and metadata."""

from bookstore.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from bookstore.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    get_handler_class,
    validate_registry_consistency,
)

__all__ = [
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    "get_handler_class",
    "validate_registry_consistency",
]
