"""Get identity use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView, parse_identity_id
from warden.domain.service import IdentityService


class GetIdentityRequest(BaseModel):
    """Get identity request."""

    identity_id: str


class GetIdentityUseCase:
    """Use case for loading an identity by ID."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get identity use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: GetIdentityRequest) -> IdentityView:
        """Execute get identity flow.

        Raises:
            NotFoundError: If identity not found
        """
        identity = await self.identity_service.get_by_id(
            parse_identity_id(request.identity_id)
        )
        return IdentityView.from_identity(identity)
