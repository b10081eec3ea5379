"""Domain value objects for Warden."""

from warden.domain.value.identifiers import IdentityId
from warden.domain.value.types import (
    AccessTokenPayload,
    AuthProvider,
    OAuthProfile,
    Theme,
    normalize_email,
)

__all__ = [
    # Identifiers
    "IdentityId",
    # Types
    "AccessTokenPayload",
    "AuthProvider",
    "OAuthProfile",
    "Theme",
    "normalize_email",
]
