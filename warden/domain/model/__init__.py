"""Domain model entities for Warden."""

from warden.domain.model.identity import Identity, ProviderLink, RefreshRecord

__all__ = [
    "Identity",
    "ProviderLink",
    "RefreshRecord",
]
