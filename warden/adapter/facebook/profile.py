"""Facebook Graph API profile fetcher."""

import httpx
import logfire

from warden.domain.service.identity_link_service import ProfileFetcher
from warden.domain.value import OAuthProfile


class FacebookProfileFetcher(ProfileFetcher):
    """Base class for Facebook profile fetchers.

    Provides type distinction for dependency injection.
    """

    pass


class RealFacebookProfileFetcher(FacebookProfileFetcher):
    """Looks up the Facebook account behind a user access token."""

    def __init__(self, graph_url: str, timeout: float = 10.0) -> None:
        """Initialize Facebook profile fetcher.

        Args:
            graph_url: Graph API ``/me`` endpoint
            timeout: Request timeout in seconds
        """
        self.graph_url = graph_url
        self.timeout = timeout

    async def fetch_profile(self, access_token: str) -> OAuthProfile | None:
        """Fetch id, name, email and picture from the Graph API.

        Failures are logged and reported as None.

        Args:
            access_token: Facebook user access token

        Returns:
            The Facebook profile, or None if the lookup failed
        """
        params = {"fields": "id,name,email,picture", "access_token": access_token}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.graph_url, params=params, timeout=self.timeout
                )

                if response.status_code != 200:
                    logfire.warn(
                        "Facebook profile request failed",
                        status_code=response.status_code,
                    )
                    return None

                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logfire.warn("Facebook profile HTTP error", error=str(e))
            return None

        if not isinstance(data, dict):
            logfire.warn("Facebook profile response is not an object")
            return None

        picture = data.get("picture")
        picture_data = picture.get("data") if isinstance(picture, dict) else None
        avatar_url = (
            picture_data.get("url") if isinstance(picture_data, dict) else None
        )
        try:
            profile = OAuthProfile(
                provider_id=str(data["id"]) if data.get("id") else None,
                display_name=data.get("name"),
                email=data.get("email"),
                avatar_url=avatar_url,
            )
        except ValueError as e:
            logfire.warn("Facebook profile response malformed", error=str(e))
            return None

        logfire.info(
            "Facebook profile fetched",
            provider_id=profile.provider_id,
            has_email=profile.email is not None,
        )
        return profile


class MockFacebookProfileFetcher(FacebookProfileFetcher):
    """Mock Facebook profile fetcher for testing.

    Returns the profile registered for a token, or None.
    """

    def __init__(self, profiles: dict[str, OAuthProfile] | None = None) -> None:
        self.profiles = profiles if profiles is not None else {}

    async def fetch_profile(self, access_token: str) -> OAuthProfile | None:
        return self.profiles.get(access_token)
