"""Domain services."""

from .base import Service
from .identity_link_service import IdentityLinkService, ProfileFetcher
from .identity_service import IdentityService
from .password_service import PasswordService
from .token_service import TokenService
from .verification_service import EmailDispatcher, VerificationService

__all__ = [
    "EmailDispatcher",
    "IdentityLinkService",
    "IdentityService",
    "PasswordService",
    "ProfileFetcher",
    "Service",
    "TokenService",
    "VerificationService",
]
