"""Domain layer DI providers."""

from dishka import Scope, provide

from warden.config import AuthSettings
from warden.domain.repository import IdentityRepository
from warden.domain.service import (
    EmailDispatcher,
    IdentityLinkService,
    IdentityService,
    PasswordService,
    TokenService,
    VerificationService,
)
from warden.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(rounds=auth_settings.password_hash_rounds)

    @provide
    def get_token_service(
        self, identity_repository: IdentityRepository, auth_settings: AuthSettings
    ) -> TokenService:
        """Provide session token domain service."""
        return TokenService(
            identity_repository=identity_repository, auth_settings=auth_settings
        )

    @provide
    def get_verification_service(
        self,
        identity_repository: IdentityRepository,
        email_dispatcher: EmailDispatcher,
        auth_settings: AuthSettings,
    ) -> VerificationService:
        """Provide email verification domain service."""
        return VerificationService(
            identity_repository=identity_repository,
            email_dispatcher=email_dispatcher,
            token_bytes=auth_settings.verification_token_bytes,
        )

    @provide
    def get_identity_service(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordService,
        verification_service: VerificationService,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_repository=identity_repository,
            password_service=password_service,
            verification_service=verification_service,
        )

    @provide
    def get_identity_link_service(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ) -> IdentityLinkService:
        """Provide OAuth identity linking domain service."""
        return IdentityLinkService(
            identity_repository=identity_repository,
            password_service=password_service,
            token_service=token_service,
        )
