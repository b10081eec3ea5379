"""Profile use cases."""

from .get_identity import GetIdentityRequest, GetIdentityUseCase
from .update_avatar import UpdateAvatarRequest, UpdateAvatarUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .update_theme import UpdateThemeRequest, UpdateThemeUseCase

__all__ = [
    "GetIdentityRequest",
    "GetIdentityUseCase",
    "UpdateAvatarRequest",
    "UpdateAvatarUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UpdateThemeRequest",
    "UpdateThemeUseCase",
]
