"""Email verification domain service.

Identities start unverified and move to verified exactly once, by
presenting the latest token sent to their email address.
"""

import secrets

import logfire

from warden.domain.error import (
    AlreadyVerifiedError,
    InvalidVerificationTokenError,
    NotFoundError,
)
from warden.domain.model import Identity
from warden.domain.repository import IdentityRepository
from warden.domain.value import normalize_email

from .base import Service


class EmailDispatcher:
    """Outbound email interface for verification messages."""

    async def send_verification(self, email: str, token: str) -> None:
        """Deliver a verification token to an email address.

        Args:
            email: Recipient address
            token: Verification token to embed in the message

        Raises:
            UpstreamError: If delivery fails
        """
        raise NotImplementedError


class VerificationService(Service):
    """Domain service for the unverified -> verified transition."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        email_dispatcher: EmailDispatcher,
        token_bytes: int = 32,
    ) -> None:
        """Initialize verification service.

        Args:
            identity_repository: Identity repository
            email_dispatcher: Delivers verification tokens
            token_bytes: Entropy of generated verification tokens
        """
        self.identity_repository = identity_repository
        self.email_dispatcher = email_dispatcher
        self.token_bytes = token_bytes

    def new_token(self) -> str:
        """Generate an opaque, URL-safe verification token."""
        return secrets.token_urlsafe(self.token_bytes)

    async def dispatch(self, email: str) -> str:
        """Generate a verification token and send it to an address.

        Args:
            email: Recipient address

        Returns:
            The token that was sent

        Raises:
            UpstreamError: If delivery fails
        """
        token = self.new_token()
        await self.email_dispatcher.send_verification(email, token)
        logfire.info("Verification email dispatched", email=email)
        return token

    async def request_verification(self, email: str) -> Identity:
        """Send a fresh verification token to an unverified identity.

        Any previously sent token stops working: only the latest is stored.
        The email is sent before the token is persisted, so a delivery
        failure leaves the stored token unchanged.

        Args:
            email: Email address of the identity

        Returns:
            The persisted identity holding the new token

        Raises:
            NotFoundError: If no identity has this email
            AlreadyVerifiedError: If the identity is already verified
            UpstreamError: If delivery fails
        """
        email = normalize_email(email)
        with logfire.span("verification_service.request_verification", email=email):
            identity = await self.identity_repository.find_by_email(email)
            if identity is None:
                logfire.warn("Verification requested for unknown email", email=email)
                raise NotFoundError("Identity", email)
            if identity.verified:
                logfire.info(
                    "Verification requested for verified identity",
                    identity_id=str(identity.id),
                )
                raise AlreadyVerifiedError()

            token = await self.dispatch(email)
            saved = await self.identity_repository.save(
                identity.evolve(verification_token=token)
            )
            logfire.info("Verification token replaced", identity_id=str(saved.id))
            return saved

    async def confirm(self, token: str) -> Identity:
        """Mark the identity holding this token as verified.

        Args:
            token: Verification token from the email

        Returns:
            The persisted, verified identity

        Raises:
            InvalidVerificationTokenError: If no identity holds the token
            AlreadyVerifiedError: If the identity is already verified
        """
        with logfire.span("verification_service.confirm"):
            if not token:
                raise InvalidVerificationTokenError()
            identity = await self.identity_repository.find_by_verification_token(
                token
            )
            if identity is None:
                logfire.warn("Verification rejected - unknown token")
                raise InvalidVerificationTokenError()
            if identity.verified:
                logfire.warn(
                    "Verification rejected - already verified",
                    identity_id=str(identity.id),
                )
                raise AlreadyVerifiedError()

            saved = await self.identity_repository.save(
                identity.evolve(
                    verified=True,
                    verification_token=None,
                    confirmed_verification_token=token,
                )
            )
            logfire.info("Identity verified", identity_id=str(saved.id))
            return saved
