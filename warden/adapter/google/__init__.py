"""Google adapter."""

from .profile import (
    GoogleProfileFetcher,
    MockGoogleProfileFetcher,
    RealGoogleProfileFetcher,
)

__all__ = ["GoogleProfileFetcher", "MockGoogleProfileFetcher", "RealGoogleProfileFetcher"]
