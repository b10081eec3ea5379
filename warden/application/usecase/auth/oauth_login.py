"""OAuth login use case."""

import logfire
from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import IdentityLinkService, ProfileFetcher
from warden.domain.value import AuthProvider, OAuthProfile


class OAuthLoginRequest(BaseModel):
    """OAuth login request.

    The profile fields come from the client-side provider SDK. When the
    provider access token is supplied, missing fields are looked up with
    the provider directly.
    """

    provider: AuthProvider
    provider_id: str | None = None
    display_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    provider_access_token: str | None = None


class OAuthLoginUseCase:
    """Use case for logging in with an external OAuth provider."""

    def __init__(
        self,
        identity_link_service: IdentityLinkService,
        profile_fetchers: dict[AuthProvider, ProfileFetcher],
    ) -> None:
        """Initialize OAuth login use case.

        Args:
            identity_link_service: OAuth identity linking domain service
            profile_fetchers: Profile fetcher per provider
        """
        self.identity_link_service = identity_link_service
        self.profile_fetchers = profile_fetchers

    async def execute(self, request: OAuthLoginRequest) -> IdentityView:
        """Execute OAuth login flow.

        Steps:
        1. Build the profile from the request
        2. Fill missing email or provider id from the provider, if possible
        3. Resolve or create the identity and issue a session

        Args:
            request: OAuth login request

        Returns:
            The resolved identity; tokens are null when it is unverified

        Raises:
            MissingRequiredIdentityError: If neither an email nor a provider
                id is known after enrichment
        """
        profile = OAuthProfile(
            provider_id=request.provider_id,
            display_name=request.display_name,
            email=request.email,
            avatar_url=request.avatar_url,
        )
        profile = await self._enrich(request, profile)

        identity = await self.identity_link_service.resolve_or_create(
            profile, request.provider
        )
        return IdentityView.from_identity(identity)

    async def _enrich(
        self, request: OAuthLoginRequest, profile: OAuthProfile
    ) -> OAuthProfile:
        """Overlay the provider's own view of the profile when it is incomplete.

        A failed lookup falls back to the submitted profile.
        """
        if profile.email and profile.provider_id:
            return profile
        if not request.provider_access_token:
            return profile

        fetcher = self.profile_fetchers.get(request.provider)
        if fetcher is None:
            logfire.warn(
                "No profile fetcher configured", provider=request.provider.value
            )
            return profile

        fetched = await fetcher.fetch_profile(request.provider_access_token)
        logfire.info(
            "Provider profile lookup finished",
            provider=request.provider.value,
            found=fetched is not None,
        )
        return profile.enriched_with(fetched)
