"""Response models shared by use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from warden.domain.error import NotFoundError
from warden.domain.model import Identity
from warden.domain.value import AuthProvider, IdentityId, Theme


def parse_identity_id(raw: str) -> IdentityId:
    """Parse a caller-supplied identity ID.

    Raises:
        NotFoundError: If the value is not a valid ID
    """
    try:
        return IdentityId(UUID(raw))
    except ValueError as e:
        raise NotFoundError("Identity", raw) from e


class ProviderLinkInfo(BaseModel):
    """Provider link information for response."""

    provider: AuthProvider
    provider_id: str


class IdentityView(BaseModel):
    """Identity as returned to callers.

    Carries the session tokens but never the password hash or any
    verification token.
    """

    id: str
    username: str
    email: str | None
    verified: bool
    access_token: str | None
    refresh_token: str | None
    refresh_token_expires_at: datetime | None
    provider_links: list[ProviderLinkInfo]
    theme: Theme
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityView":
        """Build the view from a domain identity."""
        record = identity.refresh_record
        return cls(
            id=str(identity.id),
            username=identity.username,
            email=identity.email,
            verified=identity.verified,
            access_token=identity.access_token,
            refresh_token=record.token if record else None,
            refresh_token_expires_at=record.expires_at if record else None,
            provider_links=[
                ProviderLinkInfo(provider=link.provider_name, provider_id=link.provider_id)
                for link in identity.provider_links
            ],
            theme=identity.theme,
            avatar_url=identity.avatar_url,
            created_at=identity.created_at,
            updated_at=identity.updated_at,
        )
