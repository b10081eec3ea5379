"""Unit tests for OAuthProfile."""

from warden.domain.value import OAuthProfile


class TestOAuthProfile:
    def test_blank_fields_are_absent(self):
        profile = OAuthProfile(provider_id="  ", email="", display_name="Bob")
        assert profile.provider_id is None
        assert profile.email is None
        assert not profile.is_resolvable

    def test_email_is_normalized(self):
        profile = OAuthProfile(email="  Bob@X.com ")
        assert profile.email == "bob@x.com"
        assert profile.is_resolvable

    def test_enrichment_prefers_fetched_values(self):
        submitted = OAuthProfile(provider_id="f1", display_name="Bob")
        fetched = OAuthProfile(
            provider_id="f1", display_name="Robert", email="bob@x.com"
        )

        enriched = submitted.enriched_with(fetched)

        assert enriched.display_name == "Robert"
        assert enriched.email == "bob@x.com"
        assert enriched.avatar_url is None

    def test_enrichment_without_fetch_keeps_submitted(self):
        submitted = OAuthProfile(provider_id="f1")
        assert submitted.enriched_with(None) is submitted
