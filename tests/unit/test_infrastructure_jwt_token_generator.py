"""Unit tests for JWTTokenGenerator.

Tests cover:
- Claims (sub, purpose, iat, exp, jti)
- Purpose-specific lifetimes
- Unique token id per call
- Short secret rejected
"""

from datetime import timedelta

import jwt
import pytest
from uuid_extensions import uuid7

from bookstore.domain.entities import User
from bookstore.domain.protocols.token_generator_protocol import TokenPurpose
from bookstore.infrastructure.security import JWTTokenGenerator

SECRET = "test-secret-key-that-is-at-least-32-bytes-long"


@pytest.fixture
def user():
    return User(id=uuid7(), username="alice", email="alice@example.com")


@pytest.fixture
def generator():
    return JWTTokenGenerator(
        SECRET,
        confirmation_ttl=timedelta(hours=24),
        password_reset_ttl=timedelta(minutes=15),
    )


def decode(token: str) -> dict:
    return jwt.decode(token, SECRET, algorithms=["HS256"])


@pytest.mark.unit
class TestJWTTokenGenerator:
    """Test token contents."""

    def test_confirmation_token_claims(self, generator, user):
        claims = decode(generator.generate(TokenPurpose.CONFIRMATION, user))

        assert claims["sub"] == str(user.id)
        assert claims["purpose"] == "confirmation"
        assert claims["exp"] - claims["iat"] == 24 * 3600
        assert claims["jti"]

    def test_password_reset_token_lifetime(self, generator, user):
        claims = decode(generator.generate(TokenPurpose.PASSWORD_RESET, user))

        assert claims["purpose"] == "password_reset"
        assert claims["exp"] - claims["iat"] == 15 * 60

    def test_each_token_has_unique_id(self, generator, user):
        first = decode(generator.generate(TokenPurpose.CONFIRMATION, user))
        second = decode(generator.generate(TokenPurpose.CONFIRMATION, user))

        assert first["jti"] != second["jti"]

    def test_wrong_secret_fails_verification(self, generator, user):
        token = generator.generate(TokenPurpose.CONFIRMATION, user)

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(token, "x" * 40, algorithms=["HS256"])

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTTokenGenerator("too-short")
