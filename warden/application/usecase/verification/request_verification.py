"""Request verification use case."""

from pydantic import BaseModel

from warden.domain.service import VerificationService


class RequestVerificationRequest(BaseModel):
    """Request (or re-request) a verification email."""

    email: str


class RequestVerificationResponse(BaseModel):
    """Confirmation that a verification email went out."""

    email: str
    sent: bool = True


class RequestVerificationUseCase:
    """Use case for sending a fresh verification token.

    Any token sent earlier stops working.
    """

    def __init__(self, verification_service: VerificationService) -> None:
        """Initialize request verification use case.

        Args:
            verification_service: Email verification domain service
        """
        self.verification_service = verification_service

    async def execute(
        self, request: RequestVerificationRequest
    ) -> RequestVerificationResponse:
        """Execute request verification flow.

        Raises:
            NotFoundError: If no identity has this email
            AlreadyVerifiedError: If the identity is already verified
            UpstreamError: If the email cannot be sent
        """
        identity = await self.verification_service.request_verification(
            request.email
        )
        return RequestVerificationResponse(email=identity.email)
