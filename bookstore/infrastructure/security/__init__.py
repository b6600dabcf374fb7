"""Security adapters."""

from bookstore.infrastructure.security.jwt_token_generator import JWTTokenGenerator

__all__ = ["JWTTokenGenerator"]
