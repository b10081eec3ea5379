"""Domain layer errors.

Every failure surfaced by the core belongs to one of six categories:
validation, not found, conflict, authentication, already-in-desired-state
and upstream.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MissingRequiredIdentityError(ValidationError):
    """Raised when an OAuth profile has neither an email nor a provider id."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            f"{provider} profile carries neither an email nor an account id"
        )


class InvalidThemeError(ValidationError):
    """Raised when a theme outside the supported set is requested."""

    def __init__(self, theme: str, allowed: list[str]):
        self.theme = theme
        super().__init__(
            f"Theme must be one of {', '.join(allowed)}, got {theme!r}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class EmailInUseError(ConflictError):
    """Raised when an email already belongs to another identity."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email in use")


class AuthenticationError(DomainError):
    """Base for credential and token failures."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when email or password is wrong."""

    def __init__(self, message: str = "Email or password is wrong"):
        super().__init__(message)


class InvalidAccessTokenError(AuthenticationError):
    """Raised when an access token is invalid, expired or revoked."""

    def __init__(self, message: str = "Invalid or expired access token"):
        super().__init__(message)


class InvalidRefreshTokenError(AuthenticationError):
    """Raised when a refresh token matches no identity."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message)


class ExpiredRefreshTokenError(AuthenticationError):
    """Raised when a refresh token has passed its expiry."""

    def __init__(self, message: str = "Refresh token expired"):
        super().__init__(message)


class InvalidVerificationTokenError(AuthenticationError):
    """Raised when a verification token matches no identity."""

    def __init__(self, message: str = "Invalid or expired verification token"):
        super().__init__(message)


class AlreadyInDesiredStateError(DomainError):
    """Raised when a transition targets the state already held."""

    pass


class AlreadyVerifiedError(AlreadyInDesiredStateError):
    """Raised when verifying an identity that is already verified."""

    def __init__(self, message: str = "Verification has already been passed"):
        super().__init__(message)


class UpstreamError(DomainError):
    """Raised when an external collaborator (email, provider API) fails."""

    pass
