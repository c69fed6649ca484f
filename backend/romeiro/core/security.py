"""Password hashing and JWT helpers."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from romeiro.core.config import get_settings


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except (ValueError, TypeError):  # malformed hash
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def create_access_token(
    user_id: uuid.UUID | str,
    *,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed bearer token for a user."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode a JWT token, raising JWTError on failure."""
    settings = get_settings()
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )


def subject_from_token(token: str) -> uuid.UUID:
    """Return the user id carried by a token.

    Raises ``JWTError`` when the token is invalid, expired or carries a
    malformed subject.
    """
    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("Token has no subject")
    try:
        return uuid.UUID(str(subject))
    except ValueError as exc:
        raise JWTError("Token subject is not a user id") from exc
