"""OAuth provider profile fetcher providers."""

from dishka import Scope, provide

from warden.adapter.facebook import FacebookProfileFetcher, RealFacebookProfileFetcher
from warden.adapter.google import GoogleProfileFetcher, RealGoogleProfileFetcher
from warden.config import OAuthSettings
from warden.domain.service import ProfileFetcher
from warden.domain.value import AuthProvider
from warden.util.di.base import ProviderBase
from warden.util.observability import instrument_httpx


class OAuthProvider(ProviderBase):
    """OAuth component base."""

    __mock_component__ = "oauth"


class ProdOAuthProvider(OAuthProvider):
    """Production OAuth provider calling the real provider APIs."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_facebook_profile_fetcher(
        self, oauth_settings: OAuthSettings
    ) -> FacebookProfileFetcher:
        """Provide Facebook Graph API profile fetcher."""
        instrument_httpx()
        return RealFacebookProfileFetcher(
            graph_url=oauth_settings.facebook_graph_url,
            timeout=oauth_settings.timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_google_profile_fetcher(
        self, oauth_settings: OAuthSettings
    ) -> GoogleProfileFetcher:
        """Provide Google userinfo profile fetcher."""
        return RealGoogleProfileFetcher(
            userinfo_url=oauth_settings.google_userinfo_url,
            timeout=oauth_settings.timeout_seconds,
        )


class ProfileFetcherAggregatorProvider(ProviderBase):
    """Provider that aggregates all profile fetchers into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_profile_fetchers(
        self,
        facebook_profile_fetcher: FacebookProfileFetcher,
        google_profile_fetcher: GoogleProfileFetcher,
    ) -> dict[AuthProvider, ProfileFetcher]:
        """Provide the profile fetcher for every supported provider.

        Args:
            facebook_profile_fetcher: Facebook fetcher (specific type)
            google_profile_fetcher: Google fetcher (specific type)

        Returns:
            Dictionary mapping AuthProvider to ProfileFetcher
        """
        return {
            AuthProvider.FACEBOOK: facebook_profile_fetcher,
            AuthProvider.GOOGLE: google_profile_fetcher,
        }
