"""OAuth identity linking domain service."""

from uuid import uuid4

import logfire

from warden.domain.error import MissingRequiredIdentityError
from warden.domain.model import Identity, ProviderLink
from warden.domain.repository import IdentityRepository
from warden.domain.value import AuthProvider, IdentityId, OAuthProfile

from .base import Service
from .password_service import PasswordService
from .token_service import TokenService


class ProfileFetcher:
    """Provider profile lookup interface."""

    async def fetch_profile(self, access_token: str) -> OAuthProfile | None:
        """Fetch the profile a provider access token belongs to.

        Args:
            access_token: Access token issued by the provider

        Returns:
            The provider profile, or None if the provider could not be reached
            or rejected the token
        """
        raise NotImplementedError


class IdentityLinkService(Service):
    """Resolves external provider profiles to local identities.

    Resolution order:
    1. By disclosed email - this is how a password account and an OAuth
       login converge on one identity.
    2. By the exact (provider, provider id) link.
    3. Otherwise a new identity is created.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ) -> None:
        """Initialize identity link service.

        Args:
            identity_repository: Identity repository
            password_service: Password hashing service
            token_service: Session token service
        """
        self.identity_repository = identity_repository
        self.password_service = password_service
        self.token_service = token_service

    async def resolve_or_create(
        self, profile: OAuthProfile, provider: AuthProvider
    ) -> Identity:
        """Resolve a provider profile to an identity and issue a session.

        Tokens are issued whenever the resolved identity is verified;
        otherwise the identity is persisted (if it changed) without tokens.

        Args:
            profile: Profile disclosed by the provider
            provider: Provider that authenticated the user

        Returns:
            The persisted identity

        Raises:
            MissingRequiredIdentityError: If the profile has neither an email
                nor a provider id
        """
        if not profile.is_resolvable:
            logfire.warn("OAuth profile not resolvable", provider=provider.value)
            raise MissingRequiredIdentityError(provider.value)

        with logfire.span(
            "identity_link_service.resolve_or_create",
            provider=provider.value,
            provider_id=profile.provider_id,
            has_email=profile.email is not None,
        ):
            identity = await self._find_existing(profile, provider)

            if identity is not None:
                linked = await self._ensure_link(identity, provider, profile.provider_id)
                changed = linked is not identity
                identity = linked
            else:
                identity = self._new_identity(profile, provider)
                changed = True
                logfire.info(
                    "Identity created from OAuth profile",
                    identity_id=str(identity.id),
                    provider=provider.value,
                    verified=identity.verified,
                )

            if identity.verified:
                return await self.token_service.issue_session(identity)
            if changed:
                return await self.identity_repository.save(identity)
            return identity

    async def _find_existing(
        self, profile: OAuthProfile, provider: AuthProvider
    ) -> Identity | None:
        """Look up by email first, then by provider link."""
        if profile.email:
            identity = await self.identity_repository.find_by_email(profile.email)
            if identity is not None:
                logfire.info(
                    "OAuth profile matched by email",
                    identity_id=str(identity.id),
                    provider=provider.value,
                )
                return identity

        if profile.provider_id:
            identity = await self.identity_repository.find_by_provider_link(
                provider, profile.provider_id
            )
            if identity is not None:
                logfire.info(
                    "OAuth profile matched by provider link",
                    identity_id=str(identity.id),
                    provider=provider.value,
                )
                return identity

        return None

    async def _ensure_link(
        self, identity: Identity, provider: AuthProvider, provider_id: str | None
    ) -> Identity:
        """Return the identity with the provider link attached.

        The input object is returned unchanged when there is nothing to add
        or when adding the link would break link uniqueness.
        """
        if not provider_id or identity.has_link(provider, provider_id):
            return identity

        existing = identity.link_for(provider)
        if existing is not None:
            logfire.warn(
                "Identity already linked to another account on this provider",
                identity_id=str(identity.id),
                provider=provider.value,
                linked_provider_id=existing.provider_id,
                provider_id=provider_id,
            )
            return identity

        owner = await self.identity_repository.find_by_provider_link(
            provider, provider_id
        )
        if owner is not None and owner.id != identity.id:
            logfire.warn(
                "Provider account already linked to another identity",
                identity_id=str(identity.id),
                owner_id=str(owner.id),
                provider=provider.value,
            )
            return identity

        logfire.info(
            "Provider linked to identity",
            identity_id=str(identity.id),
            provider=provider.value,
        )
        return identity.evolve(
            provider_links=[
                *identity.provider_links,
                ProviderLink(provider_name=provider, provider_id=provider_id),
            ]
        )

    def _new_identity(self, profile: OAuthProfile, provider: AuthProvider) -> Identity:
        """Build an identity for a first-time OAuth login.

        The account gets a random password that is never disclosed. It is
        verified only when the provider disclosed an email.
        """
        if profile.display_name:
            username = profile.display_name
        elif profile.provider_id:
            username = f"user_{provider.value}_{profile.provider_id}"
        else:
            username = f"user_{provider.value}_{profile.email.split('@')[0]}"

        links = (
            [ProviderLink(provider_name=provider, provider_id=profile.provider_id)]
            if profile.provider_id
            else []
        )

        return Identity(
            id=IdentityId(uuid4()),
            username=username[:255],
            email=profile.email,
            password_hash=self.password_service.hash(
                self.password_service.random_password()
            ),
            verified=profile.email is not None,
            provider_links=links,
            avatar_url=profile.avatar_url,
        )
