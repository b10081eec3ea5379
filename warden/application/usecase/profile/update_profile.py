"""Update profile use case."""

from pydantic import BaseModel, Field

from warden.application.usecase.common import IdentityView, parse_identity_id
from warden.domain.service import IdentityService


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Omitted fields are left unchanged.
    """

    identity_id: str  # From authenticated user
    username: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None)
    password: str | None = Field(default=None)


class UpdateProfileUseCase:
    """Use case for updating username, email or password.

    The caller's session is not reissued; it stays valid until it expires.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize update profile use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: UpdateProfileRequest) -> IdentityView:
        """Execute update profile flow.

        Args:
            request: Request with identity ID and fields to update

        Returns:
            The updated identity

        Raises:
            NotFoundError: If identity not found
            EmailInUseError: If the new email belongs to someone else
            ValidationError: If a new value is unusable
        """
        identity = await self.identity_service.update_profile(
            parse_identity_id(request.identity_id),
            username=request.username,
            email=request.email,
            password=request.password,
        )
        return IdentityView.from_identity(identity)
