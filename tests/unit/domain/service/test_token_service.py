"""Unit tests for TokenService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from warden.domain.error import (
    AuthenticationError,
    ExpiredRefreshTokenError,
    InvalidAccessTokenError,
    InvalidRefreshTokenError,
    ValidationError,
)
from warden.domain.service import TokenService
from warden.persistence.repository.inmemory import InMemoryIdentityRepository
from warden.util.jwt import create_token
from tests.factories import make_auth_settings, make_identity, make_refresh_record


@pytest.fixture
def repo() -> InMemoryIdentityRepository:
    return InMemoryIdentityRepository()


@pytest.fixture
def service(repo) -> TokenService:
    return TokenService(repo, make_auth_settings())


class TestIssueSession:
    @pytest.mark.asyncio
    async def test_verified_identity_gets_token_pair(self, repo, service):
        identity = make_identity(verified=True)

        issued = await service.issue_session(identity)

        assert issued.access_token is not None
        assert issued.refresh_record is not None
        assert len(issued.refresh_record.token) >= 64  # 32+ bytes, hex encoded
        window = issued.refresh_record.expires_at - issued.refresh_record.created_at
        assert window == timedelta(days=7)
        assert await repo.find_by_id(identity.id) == issued

    @pytest.mark.asyncio
    async def test_access_token_claims(self, service):
        identity = make_identity(verified=True)

        issued = await service.issue_session(identity)
        payload = jwt.decode(
            issued.access_token, "test-secret", algorithms=["HS256"]
        )

        assert payload["id"] == str(identity.id)
        assert payload["username"] == "alice"
        assert payload["email"] == "alice@x.com"
        assert payload["exp"] - payload["iat"] == 15 * 60

    @pytest.mark.asyncio
    async def test_unverified_identity_gets_nothing(self, repo, service):
        identity = make_identity(verified=False)

        result = await service.issue_session(identity)

        assert result is identity
        assert result.access_token is None
        assert result.refresh_record is None
        assert repo.save_count == 0


class TestRotate:
    @pytest.mark.asyncio
    async def test_rotation_issues_fresh_pair(self, service):
        issued = await service.issue_session(make_identity(verified=True))
        original = issued.refresh_record.token

        rotated = await service.rotate(original)

        assert rotated.id == issued.id
        assert rotated.refresh_record.token != original
        assert rotated.access_token != issued.access_token

    @pytest.mark.asyncio
    async def test_second_rotation_with_same_token_fails(self, service):
        issued = await service.issue_session(make_identity(verified=True))
        original = issued.refresh_record.token

        await service.rotate(original)

        with pytest.raises(AuthenticationError):
            await service.rotate(original)

    @pytest.mark.asyncio
    async def test_unknown_token_fails(self, service):
        with pytest.raises(InvalidRefreshTokenError):
            await service.rotate("no-such-token")

    @pytest.mark.asyncio
    async def test_empty_token_is_a_validation_error(self, repo, service):
        with pytest.raises(ValidationError):
            await service.rotate("")
        assert repo.save_count == 0

    @pytest.mark.asyncio
    async def test_expired_token_fails_without_mutation(self, repo, service):
        expired = make_refresh_record(
            "old-token", age=timedelta(days=8), lifetime=timedelta(days=7)
        )
        identity = make_identity(
            verified=True, access_token="old-access", refresh_record=expired
        )
        await repo.save(identity)
        saves_before = repo.save_count

        with pytest.raises(ExpiredRefreshTokenError):
            await service.rotate("old-token")

        assert repo.save_count == saves_before
        assert await repo.find_by_id(identity.id) == identity


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_current_token_authenticates(self, service):
        issued = await service.issue_session(make_identity(verified=True))

        identity = await service.authenticate(issued.access_token)

        assert identity.id == issued.id

    @pytest.mark.asyncio
    async def test_revoked_token_is_rejected(self, service):
        issued = await service.issue_session(make_identity(verified=True))
        await service.revoke(issued)

        with pytest.raises(InvalidAccessTokenError):
            await service.authenticate(issued.access_token)

    @pytest.mark.asyncio
    async def test_superseded_token_is_rejected(self, service):
        issued = await service.issue_session(make_identity(verified=True))
        await service.rotate(issued.refresh_record.token)

        with pytest.raises(InvalidAccessTokenError):
            await service.authenticate(issued.access_token)

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, repo, service):
        identity = make_identity(verified=True)
        token = create_token(
            identity_id=str(identity.id),
            username=identity.username,
            email=identity.email,
            settings=make_auth_settings(),
            now=datetime.now(timezone.utc) - timedelta(hours=1),
        )
        await repo.save(identity.evolve(access_token=token))

        with pytest.raises(InvalidAccessTokenError):
            await service.authenticate(token)

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_is_rejected(self, service):
        identity = make_identity(verified=True)
        token = create_token(
            identity_id=str(identity.id),
            username=identity.username,
            email=identity.email,
            settings=make_auth_settings(jwt_secret="another-secret"),
        )

        with pytest.raises(InvalidAccessTokenError):
            await service.authenticate(token)

    @pytest.mark.asyncio
    async def test_garbage_is_rejected(self, service):
        with pytest.raises(InvalidAccessTokenError):
            await service.authenticate("not.a.jwt")


class TestRevoke:
    @pytest.mark.asyncio
    async def test_revoke_clears_both_tokens(self, repo, service):
        issued = await service.issue_session(make_identity(verified=True))

        revoked = await service.revoke(issued)

        assert revoked.access_token is None
        assert revoked.refresh_record is None
        with pytest.raises(InvalidRefreshTokenError):
            await service.rotate(issued.refresh_record.token)
