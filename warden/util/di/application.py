"""Application layer DI providers."""

from dishka import Scope, provide

from warden.application.usecase.auth import (
    AuthenticateUseCase,
    LoginUseCase,
    LogoutUseCase,
    OAuthLoginUseCase,
    RefreshUseCase,
    RegisterUseCase,
)
from warden.application.usecase.profile import (
    GetIdentityUseCase,
    UpdateAvatarUseCase,
    UpdateProfileUseCase,
    UpdateThemeUseCase,
)
from warden.application.usecase.verification import (
    ConfirmEmailUseCase,
    RequestVerificationUseCase,
)
from warden.domain.service import (
    IdentityLinkService,
    IdentityService,
    ProfileFetcher,
    TokenService,
    VerificationService,
)
from warden.domain.value import AuthProvider
from warden.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, identity_service: IdentityService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(identity_service=identity_service)

    @provide
    def get_login_use_case(
        self, identity_service: IdentityService, token_service: TokenService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            identity_service=identity_service, token_service=token_service
        )

    @provide
    def get_logout_use_case(
        self, identity_service: IdentityService, token_service: TokenService
    ) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(
            identity_service=identity_service, token_service=token_service
        )

    @provide
    def get_refresh_use_case(self, token_service: TokenService) -> RefreshUseCase:
        """Provide refresh use case."""
        return RefreshUseCase(token_service=token_service)

    @provide
    def get_oauth_login_use_case(
        self,
        identity_link_service: IdentityLinkService,
        profile_fetchers: dict[AuthProvider, ProfileFetcher],
    ) -> OAuthLoginUseCase:
        """Provide OAuth login use case."""
        return OAuthLoginUseCase(
            identity_link_service=identity_link_service,
            profile_fetchers=profile_fetchers,
        )

    @provide
    def get_authenticate_use_case(
        self, token_service: TokenService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(token_service=token_service)

    # Verification use cases
    @provide
    def get_request_verification_use_case(
        self, verification_service: VerificationService
    ) -> RequestVerificationUseCase:
        """Provide request verification use case."""
        return RequestVerificationUseCase(verification_service=verification_service)

    @provide
    def get_confirm_email_use_case(
        self, verification_service: VerificationService
    ) -> ConfirmEmailUseCase:
        """Provide confirm email use case."""
        return ConfirmEmailUseCase(verification_service=verification_service)

    # Profile use cases
    @provide
    def get_get_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetIdentityUseCase:
        """Provide get identity use case."""
        return GetIdentityUseCase(identity_service=identity_service)

    @provide
    def get_update_profile_use_case(
        self, identity_service: IdentityService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(identity_service=identity_service)

    @provide
    def get_update_avatar_use_case(
        self, identity_service: IdentityService
    ) -> UpdateAvatarUseCase:
        """Provide update avatar use case."""
        return UpdateAvatarUseCase(identity_service=identity_service)

    @provide
    def get_update_theme_use_case(
        self, identity_service: IdentityService
    ) -> UpdateThemeUseCase:
        """Provide update theme use case."""
        return UpdateThemeUseCase(identity_service=identity_service)
