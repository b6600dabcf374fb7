"""API v1 routers.

Resources:
    /api/v1/books                  - Book listing, search, creation, ratings
    /api/v1/categories             - Categories and per-category listing
    /api/v1/confirmation-emails    - Email confirmation links
    /api/v1/password-reset-tokens  - Password reset links
"""

from fastapi import APIRouter

from bookstore.core.config import settings
from bookstore.presentation.api.v1.account_notifications import (
    router as account_notifications_router,
)
from bookstore.presentation.api.v1.books import router as books_router
from bookstore.presentation.api.v1.categories import router as categories_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(books_router)
v1_router.include_router(categories_router)
v1_router.include_router(account_notifications_router)

__all__ = [
    "v1_router",
    "books_router",
    "categories_router",
    "account_notifications_router",
]
