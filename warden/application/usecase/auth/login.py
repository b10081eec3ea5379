"""Login use case."""

import logfire
from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import IdentityService, TokenService


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(
        self, identity_service: IdentityService, token_service: TokenService
    ) -> None:
        """Initialize login use case.

        Args:
            identity_service: Identity domain service
            token_service: Session token domain service
        """
        self.identity_service = identity_service
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> IdentityView:
        """Execute login flow.

        Steps:
        1. Check the email/password pair
        2. Issue a fresh token pair (skipped for unverified identities)

        Args:
            request: Login credentials

        Returns:
            The identity with its new session; tokens are null while the
            identity is unverified

        Raises:
            InvalidCredentialsError: If email or password is wrong
        """
        identity = await self.identity_service.check_credentials(
            request.email, request.password
        )
        identity = await self.token_service.issue_session(identity)

        logfire.info(
            "User logged in",
            identity_id=str(identity.id),
            verified=identity.verified,
        )
        return IdentityView.from_identity(identity)
