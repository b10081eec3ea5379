"""Google OpenID Connect userinfo profile fetcher."""

import httpx
import logfire

from warden.domain.service.identity_link_service import ProfileFetcher
from warden.domain.value import OAuthProfile


class GoogleProfileFetcher(ProfileFetcher):
    """Base class for Google profile fetchers.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleProfileFetcher(GoogleProfileFetcher):
    """Looks up the Google account behind an OAuth access token."""

    def __init__(self, userinfo_url: str, timeout: float = 10.0) -> None:
        """Initialize Google profile fetcher.

        Args:
            userinfo_url: OpenID Connect userinfo endpoint
            timeout: Request timeout in seconds
        """
        self.userinfo_url = userinfo_url
        self.timeout = timeout

    async def fetch_profile(self, access_token: str) -> OAuthProfile | None:
        """Fetch the userinfo claims for a token.

        Failures are logged and reported as None. The email is only used
        when Google reports it as verified.

        Args:
            access_token: Google OAuth access token

        Returns:
            The Google profile, or None if the lookup failed
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.warn(
                        "Google userinfo request failed",
                        status_code=response.status_code,
                    )
                    return None

                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logfire.warn("Google userinfo HTTP error", error=str(e))
            return None

        if not isinstance(data, dict):
            logfire.warn("Google userinfo response is not an object")
            return None

        email = data.get("email") if data.get("email_verified", True) else None
        try:
            profile = OAuthProfile(
                provider_id=data.get("sub"),
                display_name=data.get("name"),
                email=email,
                avatar_url=data.get("picture"),
            )
        except ValueError as e:
            logfire.warn("Google userinfo response malformed", error=str(e))
            return None

        logfire.info(
            "Google profile fetched",
            provider_id=profile.provider_id,
            has_email=profile.email is not None,
        )
        return profile


class MockGoogleProfileFetcher(GoogleProfileFetcher):
    """Mock Google profile fetcher for testing.

    Returns the profile registered for a token, or None.
    """

    def __init__(self, profiles: dict[str, OAuthProfile] | None = None) -> None:
        self.profiles = profiles if profiles is not None else {}

    async def fetch_profile(self, access_token: str) -> OAuthProfile | None:
        return self.profiles.get(access_token)
