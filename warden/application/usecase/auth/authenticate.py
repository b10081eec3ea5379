"""Authenticate use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import TokenService


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str  # Access token


class AuthenticateUseCase:
    """Use case for resolving the caller behind an access token."""

    def __init__(self, token_service: TokenService) -> None:
        """Initialize authenticate use case.

        Args:
            token_service: Session token domain service
        """
        self.token_service = token_service

    async def execute(self, request: AuthenticateRequest) -> IdentityView:
        """Execute authentication flow.

        Steps:
        1. Verify the token signature and expiry
        2. Load the identity named by the token
        3. Check the token is still the identity's current one

        Args:
            request: Request with access token

        Returns:
            The authenticated identity

        Raises:
            InvalidAccessTokenError: If the token is invalid, expired or revoked
        """
        identity = await self.token_service.authenticate(request.token)
        return IdentityView.from_identity(identity)
