"""Confirm email use case."""

from pydantic import BaseModel

from warden.application.usecase.common import IdentityView
from warden.domain.service import VerificationService


class ConfirmEmailRequest(BaseModel):
    """Confirm email request."""

    token: str  # Verification token from the email link


class ConfirmEmailUseCase:
    """Use case for confirming an email address."""

    def __init__(self, verification_service: VerificationService) -> None:
        self.verification_service = verification_service

    async def execute(self, request: ConfirmEmailRequest) -> IdentityView:
        """Execute confirm email flow.

        Confirmation does not sign the user in; tokens are issued on the
        next login.

        Raises:
            InvalidVerificationTokenError: If the token matches no identity
            AlreadyVerifiedError: If the token was already used
        """
        identity = await self.verification_service.confirm(request.token)
        return IdentityView.from_identity(identity)
