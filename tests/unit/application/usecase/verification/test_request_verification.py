"""Unit tests for the verification use cases."""

from dishka import AsyncContainer
import pytest

from warden.application.usecase.auth import RegisterRequest, RegisterUseCase
from warden.application.usecase.verification import (
    ConfirmEmailRequest,
    ConfirmEmailUseCase,
    RequestVerificationRequest,
    RequestVerificationUseCase,
)
from warden.domain.error import AlreadyInDesiredStateError, InvalidVerificationTokenError
from warden.domain.service import EmailDispatcher
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVerificationUseCases:
    @pytest.mark.asyncio
    async def test_resend_then_confirm_latest(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        resend = await unit_env.get(RequestVerificationUseCase)
        confirm = await unit_env.get(ConfirmEmailUseCase)
        dispatcher = await unit_env.get(EmailDispatcher)
        await register.execute(
            RegisterRequest(username="alice", email="alice@x.com", password="pw1")
        )
        first = dispatcher.last_token_for("alice@x.com")

        response = await resend.execute(
            RequestVerificationRequest(email="alice@x.com")
        )
        latest = dispatcher.last_token_for("alice@x.com")

        assert response.sent is True
        assert latest != first
        with pytest.raises(InvalidVerificationTokenError):
            await confirm.execute(ConfirmEmailRequest(token=first))
        assert (await confirm.execute(ConfirmEmailRequest(token=latest))).verified

    @pytest.mark.asyncio
    async def test_confirm_twice(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        confirm = await unit_env.get(ConfirmEmailUseCase)
        dispatcher = await unit_env.get(EmailDispatcher)
        await register.execute(
            RegisterRequest(username="alice", email="alice@x.com", password="pw1")
        )
        token = dispatcher.last_token_for("alice@x.com")
        await confirm.execute(ConfirmEmailRequest(token=token))

        with pytest.raises(AlreadyInDesiredStateError):
            await confirm.execute(ConfirmEmailRequest(token=token))
