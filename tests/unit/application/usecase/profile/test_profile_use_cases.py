"""Unit tests for the profile use cases."""

from dishka import AsyncContainer
import pytest

from warden.application.usecase.auth import RegisterRequest, RegisterUseCase
from warden.application.usecase.profile import (
    GetIdentityRequest,
    GetIdentityUseCase,
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UpdateThemeRequest,
    UpdateThemeUseCase,
)
from warden.domain.error import (
    EmailInUseError,
    InvalidThemeError,
    NotFoundError,
    ValidationError,
)
from warden.domain.value import Theme
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register(env: AsyncContainer, username: str, email: str):
    use_case = await env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(username=username, email=email, password="pw1")
    )


class TestGetIdentity:
    @pytest.mark.asyncio
    async def test_found(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(GetIdentityUseCase)

        view = await use_case.execute(GetIdentityRequest(identity_id=alice.id))

        assert view.username == "alice"

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetIdentityUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetIdentityRequest(identity_id="not-a-uuid"))

        assert isinstance(exc_info.value.__cause__, ValueError)


class TestUpdateTheme:
    @pytest.mark.asyncio
    async def test_switch_to_dark(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateThemeUseCase)

        view = await use_case.execute(
            UpdateThemeRequest(identity_id=alice.id, theme="dark")
        )

        assert view.theme == Theme.DARK

    @pytest.mark.asyncio
    async def test_rejects_unknown_theme(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateThemeUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateThemeRequest(identity_id=alice.id, theme="purple")
            )

    @pytest.mark.asyncio
    async def test_theme_error_type(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateThemeUseCase)

        with pytest.raises(InvalidThemeError):
            await use_case.execute(UpdateThemeRequest(identity_id=alice.id, theme=""))


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_change_email_to_taken_address(self, unit_env: AsyncContainer):
        await register(unit_env, "bob", "bob@x.com")
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateProfileUseCase)

        with pytest.raises(EmailInUseError):
            await use_case.execute(
                UpdateProfileRequest(identity_id=alice.id, email="bob@x.com")
            )

    @pytest.mark.asyncio
    async def test_change_username(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateProfileUseCase)

        view = await use_case.execute(
            UpdateProfileRequest(identity_id=alice.id, username="alicia")
        )

        assert view.username == "alicia"
        assert view.email == "alice@x.com"


class TestUpdateAvatar:
    @pytest.mark.asyncio
    async def test_set_avatar(self, unit_env: AsyncContainer):
        alice = await register(unit_env, "alice", "alice@x.com")
        use_case = await unit_env.get(UpdateAvatarUseCase)

        view = await use_case.execute(
            UpdateAvatarRequest(
                identity_id=alice.id, avatar_url="https://cdn.example.com/a.png"
            )
        )

        assert view.avatar_url == "https://cdn.example.com/a.png"
