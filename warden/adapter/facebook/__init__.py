"""Facebook adapter."""

from .profile import (
    FacebookProfileFetcher,
    MockFacebookProfileFetcher,
    RealFacebookProfileFetcher,
)

__all__ = [
    "FacebookProfileFetcher",
    "MockFacebookProfileFetcher",
    "RealFacebookProfileFetcher",
]
