"""Unit tests for VerificationService."""

import pytest

from warden.adapter.email import MockEmailDispatcher
from warden.domain.error import (
    AlreadyInDesiredStateError,
    AlreadyVerifiedError,
    InvalidVerificationTokenError,
    NotFoundError,
    UpstreamError,
)
from warden.domain.service import VerificationService
from warden.persistence.repository.inmemory import InMemoryIdentityRepository
from tests.factories import make_identity


@pytest.fixture
def repo() -> InMemoryIdentityRepository:
    return InMemoryIdentityRepository()


@pytest.fixture
def dispatcher() -> MockEmailDispatcher:
    return MockEmailDispatcher()


@pytest.fixture
def service(repo, dispatcher) -> VerificationService:
    return VerificationService(repo, dispatcher)


class TestConfirm:
    @pytest.mark.asyncio
    async def test_confirm_verifies_and_clears_token(self, repo, service):
        identity = make_identity(verification_token="tok-1")
        await repo.save(identity)

        confirmed = await service.confirm("tok-1")

        assert confirmed.verified is True
        assert confirmed.verification_token is None
        # Confirmation does not sign the user in
        assert confirmed.access_token is None

    @pytest.mark.asyncio
    async def test_confirm_twice_is_already_in_desired_state(self, repo, service):
        await repo.save(make_identity(verification_token="tok-1"))
        await service.confirm("tok-1")

        with pytest.raises(AlreadyInDesiredStateError):
            await service.confirm("tok-1")

    @pytest.mark.asyncio
    async def test_unknown_token(self, service):
        with pytest.raises(InvalidVerificationTokenError):
            await service.confirm("nope")

    @pytest.mark.asyncio
    async def test_empty_token(self, service):
        with pytest.raises(InvalidVerificationTokenError):
            await service.confirm("")


class TestRequestVerification:
    @pytest.mark.asyncio
    async def test_sends_and_stores_new_token(self, repo, dispatcher, service):
        identity = make_identity(verification_token="tok-1")
        await repo.save(identity)

        updated = await service.request_verification("alice@x.com")

        assert dispatcher.sent == [("alice@x.com", updated.verification_token)]
        assert updated.verification_token != "tok-1"

    @pytest.mark.asyncio
    async def test_resend_invalidates_previous_token(self, repo, dispatcher, service):
        await repo.save(make_identity(verification_token="tok-1"))
        await service.request_verification("alice@x.com")

        with pytest.raises(InvalidVerificationTokenError):
            await service.confirm("tok-1")

        latest = dispatcher.last_token_for("alice@x.com")
        assert (await service.confirm(latest)).verified

    @pytest.mark.asyncio
    async def test_lookup_normalizes_email(self, repo, service):
        await repo.save(make_identity(verification_token="tok-1"))

        updated = await service.request_verification("  ALICE@x.com ")

        assert updated.email == "alice@x.com"

    @pytest.mark.asyncio
    async def test_unknown_email(self, service):
        with pytest.raises(NotFoundError):
            await service.request_verification("nobody@x.com")

    @pytest.mark.asyncio
    async def test_already_verified(self, repo, dispatcher, service):
        await repo.save(make_identity(verified=True))

        with pytest.raises(AlreadyVerifiedError):
            await service.request_verification("alice@x.com")
        assert dispatcher.sent == []

    @pytest.mark.asyncio
    async def test_delivery_failure_keeps_old_token(self, repo, dispatcher, service):
        identity = make_identity(verification_token="tok-1")
        await repo.save(identity)
        dispatcher.fail = True

        with pytest.raises(UpstreamError):
            await service.request_verification("alice@x.com")

        stored = await repo.find_by_id(identity.id)
        assert stored.verification_token == "tok-1"
