"""Identity domain service."""

from uuid import uuid4

import logfire

from warden.domain.error import (
    EmailInUseError,
    InvalidCredentialsError,
    InvalidThemeError,
    NotFoundError,
    ValidationError,
)
from warden.domain.model import Identity
from warden.domain.repository import IdentityRepository
from warden.domain.value import IdentityId, Theme, normalize_email

from .base import Service
from .password_service import PasswordService
from .verification_service import VerificationService

MAX_USERNAME_LENGTH = 255


def _check_username(username: str) -> str:
    """Validate a username before any side effect happens."""
    username = username.strip()
    if not username or len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"Username must be 1-{MAX_USERNAME_LENGTH} characters"
        )
    return username


class IdentityService(Service):
    """Domain service for identity lifecycle and profile operations.

    Each mutating operation loads one identity, applies one change and
    saves once. None of them reissues session tokens.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordService,
        verification_service: VerificationService,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity repository
            password_service: Password hashing service
            verification_service: Email verification service
        """
        self.identity_repository = identity_repository
        self.password_service = password_service
        self.verification_service = verification_service

    async def get_by_id(self, identity_id: IdentityId) -> Identity:
        """Get identity by ID.

        Args:
            identity_id: Identity ID

        Returns:
            Identity entity

        Raises:
            NotFoundError: If identity not found
        """
        with logfire.span("identity_service.get_by_id", identity_id=str(identity_id)):
            identity = await self.identity_repository.find_by_id(identity_id)
            if not identity:
                logfire.warn("Identity not found", identity_id=str(identity_id))
                raise NotFoundError("Identity", str(identity_id))
            return identity

    async def register(self, username: str, email: str, password: str) -> Identity:
        """Create an unverified identity and send it a verification token.

        Args:
            username: Display name
            email: Email address, unique across identities
            password: Plaintext password

        Returns:
            The created identity, unverified and without tokens

        Raises:
            ValidationError: If a field is missing or the password is unusable
            EmailInUseError: If the email is already taken
            UpstreamError: If the verification email cannot be sent
        """
        email = normalize_email(email or "")
        if not email:
            raise ValidationError("Email is required")
        username = _check_username(username or "")

        with logfire.span("identity_service.register", email=email):
            if await self.identity_repository.find_by_email(email):
                logfire.warn("Registration rejected - email in use", email=email)
                raise EmailInUseError(email)

            password_hash = self.password_service.hash(password)
            verification_token = await self.verification_service.dispatch(email)

            identity = Identity(
                id=IdentityId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
                verified=False,
                verification_token=verification_token,
            )
            saved = await self.identity_repository.save(identity)
            logfire.info("Identity registered", identity_id=str(saved.id), email=email)
            return saved

    async def check_credentials(self, email: str, password: str) -> Identity:
        """Resolve an identity from an email/password pair.

        Args:
            email: Email address
            password: Candidate password

        Returns:
            The matching identity

        Raises:
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        email = normalize_email(email)
        with logfire.span("identity_service.check_credentials", email=email):
            identity = await self.identity_repository.find_by_email(email)
            if identity is None or not self.password_service.verify(
                password, identity.password_hash
            ):
                logfire.warn("Login rejected - bad credentials", email=email)
                raise InvalidCredentialsError()
            return identity

    async def update_profile(
        self,
        identity_id: IdentityId,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> Identity:
        """Apply a partial profile update.

        The password is re-hashed only when a new one is supplied. The
        current session stays valid until it expires naturally.
        Changing the email voids any outstanding verification token, so
        an unverified identity must request a new one for the new address.

        Args:
            identity_id: Identity to update
            username: New username, if changing
            email: New email, if changing
            password: New plaintext password, if changing

        Returns:
            The persisted identity

        Raises:
            NotFoundError: If identity not found
            EmailInUseError: If the new email belongs to another identity
            ValidationError: If the new password is unusable
        """
        with logfire.span(
            "identity_service.update_profile", identity_id=str(identity_id)
        ):
            identity = await self.get_by_id(identity_id)
            changes: dict = {}

            if username:
                changes["username"] = _check_username(username)

            if email:
                email = normalize_email(email)
                if email != identity.email:
                    owner = await self.identity_repository.find_by_email(email)
                    if owner is not None and owner.id != identity.id:
                        logfire.warn(
                            "Profile update rejected - email in use",
                            identity_id=str(identity_id),
                        )
                        raise EmailInUseError(email)
                    changes["email"] = email
                    # A pending token was sent to the old address
                    changes["verification_token"] = None

            if password:
                changes["password_hash"] = self.password_service.hash(password)

            saved = await self.identity_repository.save(identity.evolve(**changes))
            logfire.info(
                "Profile updated",
                identity_id=str(saved.id),
                fields=sorted(changes),
            )
            return saved

    async def update_avatar_url(
        self, identity_id: IdentityId, avatar_url: str
    ) -> Identity:
        """Point the identity at a new avatar.

        Args:
            identity_id: Identity to update
            avatar_url: Externally hosted avatar URL

        Returns:
            The persisted identity

        Raises:
            NotFoundError: If identity not found
            ValidationError: If no URL was supplied
        """
        if not avatar_url:
            raise ValidationError("Avatar URL required")
        with logfire.span(
            "identity_service.update_avatar_url", identity_id=str(identity_id)
        ):
            identity = await self.get_by_id(identity_id)
            saved = await self.identity_repository.save(
                identity.evolve(avatar_url=avatar_url)
            )
            logfire.info("Avatar updated", identity_id=str(saved.id))
            return saved

    async def update_theme(self, identity_id: IdentityId, theme: str) -> Identity:
        """Set the identity's theme preference.

        Args:
            identity_id: Identity to update
            theme: One of the Theme values

        Returns:
            The persisted identity

        Raises:
            InvalidThemeError: If the theme is not supported
            NotFoundError: If identity not found
        """
        try:
            selected = Theme(theme)
        except ValueError:
            raise InvalidThemeError(str(theme), [t.value for t in Theme]) from None

        with logfire.span(
            "identity_service.update_theme",
            identity_id=str(identity_id),
            theme=selected.value,
        ):
            identity = await self.get_by_id(identity_id)
            saved = await self.identity_repository.save(
                identity.evolve(theme=selected)
            )
            logfire.info("Theme updated", identity_id=str(saved.id), theme=selected.value)
            return saved
