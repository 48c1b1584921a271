"""
Password hashing and JWT helpers.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from forum_app.core.config import settings


class PasswordHasher:
    """Salted adaptive password hashing (bcrypt)."""

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = rounds or settings.bcrypt_rounds

    def generate(self, password: str) -> str:
        """Hash a plain-text password."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Check a plain-text password against a stored hash."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), hashed_password.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash
            return False


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Issue a signed bearer token.

    Args:
        claims: Identity claims (name, nameidentifier, email, role)
        expires_delta: Lifetime; defaults to the configured hours

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta or timedelta(hours=settings.jwt_access_token_expire_hours)
    )
    payload = {
        **claims,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Validate signature, expiry, issuer and audience of a bearer token.

    Raises:
        jwt.InvalidTokenError: On any validation failure
    """
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
