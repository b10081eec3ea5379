"""Register use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import IdentityService


class RegisterRequest(BaseModel):
    """Password registration request."""

    username: str
    email: str
    password: str


class RegisterUseCase:
    """Use case for password registration.

    The identity starts unverified, so no tokens are returned until the
    emailed verification token has been confirmed and the user logs in.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize register use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: RegisterRequest) -> IdentityView:
        """Execute registration flow.

        Args:
            request: Registration details

        Returns:
            The new, unverified identity

        Raises:
            ValidationError: If a field is missing or unusable
            EmailInUseError: If the email is already registered
            UpstreamError: If the verification email cannot be sent
        """
        identity = await self.identity_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        return IdentityView.from_identity(identity)
