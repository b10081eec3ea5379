"""Integration tests for PostgresIdentityRepository.

Run against a migrated database with WARDEN_INTEGRATION=1 and
DATABASE__URL pointing at it.
"""

import os
from uuid import uuid4

import pytest

from warden.domain.model import ProviderLink
from warden.domain.repository import IdentityRepository
from warden.domain.value import AuthProvider
from tests.factories import make_identity, make_refresh_record
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    os.environ.get("WARDEN_INTEGRATION") != "1",
    reason="set WARDEN_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_email() -> str:
    return f"{uuid4().hex[:12]}@example.com"


class TestPostgresIdentityRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_by_every_key(self, integration_env):
        repo = await integration_env.get(IdentityRepository)
        identity = make_identity(
            email=unique_email(),
            verified=True,
            access_token="access",
            refresh_record=make_refresh_record(uuid4().hex),
            provider_links=[
                ProviderLink(provider_name=AuthProvider.GOOGLE, provider_id=uuid4().hex)
            ],
        )

        await repo.save(identity)

        assert await repo.find_by_id(identity.id) == identity
        assert await repo.find_by_email(identity.email) == identity
        assert await repo.find_by_refresh_token(identity.refresh_record.token) == identity
        link = identity.provider_links[0]
        assert (
            await repo.find_by_provider_link(link.provider_name, link.provider_id)
        ) == identity

    @pytest.mark.asyncio
    async def test_update_replaces_links_and_tokens(self, integration_env):
        repo = await integration_env.get(IdentityRepository)
        identity = make_identity(
            email=unique_email(),
            verified=True,
            refresh_record=make_refresh_record(uuid4().hex),
        )
        await repo.save(identity)

        updated = identity.evolve(
            refresh_record=make_refresh_record(uuid4().hex),
            provider_links=[
                ProviderLink(provider_name=AuthProvider.FACEBOOK, provider_id=uuid4().hex)
            ],
        )
        await repo.save(updated)

        assert await repo.find_by_refresh_token(identity.refresh_record.token) is None
        stored = await repo.find_by_id(identity.id)
        assert stored.provider_links == updated.provider_links

    @pytest.mark.asyncio
    async def test_confirmed_token_still_resolves(self, integration_env):
        repo = await integration_env.get(IdentityRepository)
        token = uuid4().hex
        identity = make_identity(
            email=unique_email(), verified=True, confirmed_verification_token=token
        )
        await repo.save(identity)

        assert (await repo.find_by_verification_token(token)).id == identity.id
