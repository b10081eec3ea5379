"""Logout use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView, parse_identity_id
from warden.domain.service import IdentityService, TokenService


class LogoutRequest(BaseModel):
    """Logout request."""

    identity_id: str  # From authenticated user


class LogoutUseCase:
    """Use case for signing an identity out.

    Clears the access token and refresh record unconditionally, so both
    stop working immediately.
    """

    def __init__(
        self, identity_service: IdentityService, token_service: TokenService
    ) -> None:
        self.identity_service = identity_service
        self.token_service = token_service

    async def execute(self, request: LogoutRequest) -> IdentityView:
        """Execute logout flow.

        Raises:
            NotFoundError: If identity not found
        """
        identity = await self.identity_service.get_by_id(
            parse_identity_id(request.identity_id)
        )
        identity = await self.token_service.revoke(identity)
        return IdentityView.from_identity(identity)
