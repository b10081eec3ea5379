"""Refresh session use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import TokenService


class RefreshRequest(BaseModel):
    """Refresh token exchange request."""

    refresh_token: str


class RefreshUseCase:
    """Use case for exchanging a refresh token for a new token pair."""

    def __init__(self, token_service: TokenService) -> None:
        """Initialize refresh use case.

        Args:
            token_service: Session token domain service
        """
        self.token_service = token_service

    async def execute(self, request: RefreshRequest) -> IdentityView:
        """Execute refresh flow.

        The presented refresh token is single-use: it stops working as soon
        as this call succeeds.

        Args:
            request: Request with the current refresh token

        Returns:
            The identity carrying the new token pair

        Raises:
            ValidationError: If no refresh token was supplied
            InvalidRefreshTokenError: If the token is unknown or already used
            ExpiredRefreshTokenError: If the token has expired
        """
        identity = await self.token_service.rotate(request.refresh_token)
        return IdentityView.from_identity(identity)
