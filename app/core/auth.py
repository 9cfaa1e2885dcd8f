"""JWT verification for tokens issued by the external auth provider."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from app.settings import settings

# Validate JWT secret key at startup
_DEFAULT_SECRET = "dev-secret-key-change-in-production"

if settings.environment == "production" and settings.auth_jwt_secret == _DEFAULT_SECRET:
    raise RuntimeError(
        "SECURITY ERROR: AUTH_JWT_SECRET environment variable must be set in production. "
        "Cannot use default secret key."
    )


def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """Create a JWT shaped like the auth provider's access tokens.

    Used for local development and tests; production tokens come from the
    auth provider.

    Args:
        data: Claims to encode (``sub`` is the profile id)
        expires_delta: Optional expiration time delta, one hour by default

    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))
    to_encode.setdefault("aud", settings.auth_jwt_audience)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.auth_jwt_secret, algorithm=settings.auth_jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode and verify an access token.

    Args:
        token: JWT token to decode

    Returns:
        Decoded token payload or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
        )
        return payload
    except JWTError:
        return None
