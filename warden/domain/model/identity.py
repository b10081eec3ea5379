"""Identity aggregate root.

An identity is created by password registration or by a first OAuth
login, and carries the session state issued to it.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from warden.domain.model.common import DomainModel
from warden.domain.value import AuthProvider, IdentityId, Theme


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RefreshRecord(DomainModel):
    """The single live refresh token of an identity.

    Replaced wholesale on every rotation, never appended to.
    """

    token: str = Field(min_length=1)
    created_at: datetime
    expires_at: datetime

    @model_validator(mode="after")
    def check_window(self) -> "RefreshRecord":
        """Expiry must fall strictly after creation."""
        if self.expires_at <= self.created_at:
            raise ValueError("Refresh token must expire after it was created")
        return self

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the record has passed its expiry."""
        return self.expires_at < (now or utcnow())


class ProviderLink(DomainModel):
    """Association between an identity and an external provider account."""

    provider_name: AuthProvider
    provider_id: str = Field(min_length=1)


class Identity(DomainModel):
    """Identity aggregate root.

    Invariants enforced on construction:
    - Unverified identities hold neither an access token nor a refresh record.
    - At most one provider link per provider.
    """

    id: IdentityId
    username: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None  # Absent only for provider-only accounts
    password_hash: str
    verified: bool = False
    verification_token: Optional[str] = None
    # Kept after verification so a reused token is recognised as stale
    confirmed_verification_token: Optional[str] = None
    access_token: Optional[str] = None
    refresh_record: Optional[RefreshRecord] = None
    provider_links: list[ProviderLink] = Field(default_factory=list)
    theme: Theme = Theme.LIGHT
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("provider_links")
    @classmethod
    def one_link_per_provider(cls, v: list[ProviderLink]) -> list[ProviderLink]:
        """Reject duplicate providers."""
        providers = [link.provider_name for link in v]
        if len(providers) != len(set(providers)):
            raise ValueError("An identity can hold only one link per provider")
        return v

    @model_validator(mode="after")
    def check_session_gate(self) -> "Identity":
        """Tokens are only ever held by verified identities."""
        if not self.verified and (
            self.access_token is not None or self.refresh_record is not None
        ):
            raise ValueError("Unverified identities cannot hold session tokens")
        return self

    def evolve(self, **changes) -> "Identity":
        """Return a validated copy with ``changes`` applied.

        Unlike ``model_copy``, the copy is re-validated so the session
        invariants hold on every mutation. ``updated_at`` is bumped unless
        given explicitly.
        """
        data = dict(self)
        data["updated_at"] = utcnow()
        data.update(changes)
        return Identity.model_validate(data)

    def link_for(self, provider: AuthProvider) -> ProviderLink | None:
        """Return the link for a provider, if any."""
        for link in self.provider_links:
            if link.provider_name == provider:
                return link
        return None

    def has_link(self, provider: AuthProvider, provider_id: str) -> bool:
        """Whether this exact provider account is linked."""
        link = self.link_for(provider)
        return link is not None and link.provider_id == provider_id
