"""Core enums package.

Usage:
    from bookstore.core.enums import ErrorCode, Environment
"""

from bookstore.core.enums.environment import Environment
from bookstore.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
