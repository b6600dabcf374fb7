"""Database persistence infrastructure.

- Base model for all database entities
- Database connection and session management
- Repository and unit of work implementations
"""

from bookstore.infrastructure.persistence.base import BaseModel
from bookstore.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
