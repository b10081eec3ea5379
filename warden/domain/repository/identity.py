"""Identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from warden.domain.model.identity import Identity
from warden.domain.value import AuthProvider, IdentityId


class IdentityRepository(ABC):
    """Repository for the Identity aggregate.

    ``save`` is the sole mutation entry point; creating an identity is a
    ``save`` of a new instance. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by its (normalized) email.

        Args:
            email: The email address

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_verification_token(self, token: str) -> Optional[Identity]:
        """Find the identity holding a verification token.

        Matches the outstanding token as well as the token an identity was
        already verified with, so stale reuse can be told apart from an
        unknown token.

        Args:
            token: The verification token

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_refresh_token(self, token: str) -> Optional[Identity]:
        """Find the identity whose live refresh record carries this token.

        Args:
            token: The refresh token

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_provider_link(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Find the identity linked to an external provider account.

        Args:
            provider: The OAuth provider
            provider_id: The account's ID on that provider

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update).

        Args:
            identity: The identity to save

        Returns:
            The saved identity
        """
        pass
