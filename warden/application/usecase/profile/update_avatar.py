"""Update avatar use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView, parse_identity_id
from warden.domain.service import IdentityService


class UpdateAvatarRequest(BaseModel):
    """Update avatar request."""

    identity_id: str  # From authenticated user
    avatar_url: str  # Already uploaded elsewhere


class UpdateAvatarUseCase:
    """Use case for pointing an identity at a new avatar."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: UpdateAvatarRequest) -> IdentityView:
        """Execute update avatar flow.

        Raises:
            NotFoundError: If identity not found
            ValidationError: If the URL is empty
        """
        identity = await self.identity_service.update_avatar_url(
            parse_identity_id(request.identity_id), request.avatar_url
        )
        return IdentityView.from_identity(identity)
