"""JWT token generator (adapter).

Implements TokenGeneratorProtocol with PyJWT (HMAC-SHA256). Tokens are
self-contained: the identity provider validates them on the confirm-email
and reset-password callbacks without a database lookup.

Claims:
    - sub: user id
    - purpose: "confirmation" or "password_reset"
    - iat / exp: issue and expiry timestamps
    - jti: unique token id (UUIDv7)
"""

from datetime import UTC, datetime, timedelta

import jwt
from uuid_extensions import uuid7

from bookstore.domain.entities.user import User
from bookstore.domain.protocols.token_generator_protocol import TokenPurpose


class JWTTokenGenerator:
    """Signed, expiring tokens for account emails.

    Usage:
        generator = JWTTokenGenerator(secret_key=settings.secret_key)
        token = generator.generate(TokenPurpose.CONFIRMATION, user)
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        confirmation_ttl: timedelta = timedelta(hours=24),
        password_reset_ttl: timedelta = timedelta(minutes=15),
    ) -> None:
        """Initialize token generator.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            algorithm: JWT signing algorithm.
            confirmation_ttl: Lifetime of email confirmation tokens.
            password_reset_ttl: Lifetime of password reset tokens.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttls = {
            TokenPurpose.CONFIRMATION: confirmation_ttl,
            TokenPurpose.PASSWORD_RESET: password_reset_ttl,
        }

    def generate(self, purpose: TokenPurpose, user: User) -> str:
        """Generate a signed token for a user.

        Args:
            purpose: What the token authorizes.
            user: Token subject.

        Returns:
            JWT string (header.payload.signature).
        """
        now = datetime.now(UTC)
        payload = {
            "sub": str(user.id),
            "purpose": purpose.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttls[purpose]).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token
