"""JWT token utilities."""

import secrets
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from warden.config import AuthSettings
from warden.domain.value import AccessTokenPayload


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    identity_id: str,
    username: str,
    email: str | None,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Create a signed access token.

    Args:
        identity_id: Identity ID
        username: Username at issuance
        email: Email at issuance (may be None for provider-only accounts)
        settings: Authentication settings
        now: Issuance time (defaults to current UTC time)

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(minutes=settings.access_token_expiry_minutes)

    payload = {
        "id": identity_id,
        "username": username,
        "email": email,
        "iat": issued_at,
        "exp": expiry,
        "jti": secrets.token_hex(8),  # Distinguishes tokens minted in the same second
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> AccessTokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return AccessTokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, PydanticValidationError):
        raise JWTError("Invalid token")
