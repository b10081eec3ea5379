"""In-memory identity repository for testing."""

from typing import Optional

from warden.domain.model import Identity
from warden.domain.repository import IdentityRepository
from warden.domain.value import AuthProvider, IdentityId


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: dict[IdentityId, Identity] = {}
        self.save_count = 0

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        return self._identities.get(identity_id)

    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by email."""
        for identity in self._identities.values():
            if identity.email == email:
                return identity
        return None

    async def find_by_verification_token(self, token: str) -> Optional[Identity]:
        """Find an identity by outstanding or already-confirmed token."""
        for identity in self._identities.values():
            if token in (
                identity.verification_token,
                identity.confirmed_verification_token,
            ):
                return identity
        return None

    async def find_by_refresh_token(self, token: str) -> Optional[Identity]:
        """Find the identity holding a live refresh token."""
        for identity in self._identities.values():
            if identity.refresh_record and identity.refresh_record.token == token:
                return identity
        return None

    async def find_by_provider_link(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Find the identity linked to a provider account."""
        for identity in self._identities.values():
            if identity.has_link(provider, provider_id):
                return identity
        return None

    async def save(self, identity: Identity) -> Identity:
        """Save or update an identity."""
        self._identities[identity.id] = identity
        self.save_count += 1
        return identity
