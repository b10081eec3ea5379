"""Domain value objects for Warden.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum

from pydantic import field_validator

from warden.domain.value.common import ValueObject


class AuthProvider(str, Enum):
    """Supported external OAuth providers."""

    GOOGLE = "google"
    FACEBOOK = "facebook"


class Theme(str, Enum):
    """User interface theme preference."""

    LIGHT = "light"
    DARK = "dark"


def normalize_email(email: str) -> str:
    """Normalize an email address for storage and lookup."""
    return email.strip().lower()


class OAuthProfile(ValueObject):
    """Profile disclosed by an external OAuth provider.

    Every field is optional: providers may withhold the email, and some
    client flows only forward a partial profile.
    """

    provider_id: str | None = None  # Permanent account ID on the provider
    display_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None

    @field_validator("provider_id", "display_name", "email", "avatar_url")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty strings as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("email")
    @classmethod
    def normalize(cls, v: str | None) -> str | None:
        """Normalize the disclosed email."""
        return normalize_email(v) if v else None

    @property
    def is_resolvable(self) -> bool:
        """Whether the profile carries enough to resolve an identity."""
        return self.email is not None or self.provider_id is not None

    def enriched_with(self, fetched: "OAuthProfile | None") -> "OAuthProfile":
        """Overlay fields fetched from the provider onto this profile.

        Fetched values win where present; absent ones fall back to what
        the client submitted.
        """
        if fetched is None:
            return self
        return OAuthProfile(
            provider_id=fetched.provider_id or self.provider_id,
            display_name=fetched.display_name or self.display_name,
            email=fetched.email or self.email,
            avatar_url=fetched.avatar_url or self.avatar_url,
        )


class AccessTokenPayload(ValueObject):
    """Claims carried by a signed access token."""

    id: str
    username: str
    email: str | None = None
    exp: datetime
    iat: datetime | None = None
    jti: str | None = None
