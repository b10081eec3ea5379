"""Update theme use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView, parse_identity_id
from warden.domain.service import IdentityService


class UpdateThemeRequest(BaseModel):
    """Update theme request.

    The theme is validated by the domain so an unsupported value surfaces
    as a domain validation error rather than a request parsing error.
    """

    identity_id: str  # From authenticated user
    theme: str


class UpdateThemeUseCase:
    """Use case for changing the UI theme preference."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize update theme use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: UpdateThemeRequest) -> IdentityView:
        """Execute update theme flow.

        Raises:
            InvalidThemeError: If the theme is not light or dark
            NotFoundError: If identity not found
        """
        identity = await self.identity_service.update_theme(
            parse_identity_id(request.identity_id), request.theme
        )
        return IdentityView.from_identity(identity)
