"""Dependency injection module."""

from typing import Type

from warden.util.di.application import ProdApplicationProvider
from warden.util.di.base import Component, ProviderBase
from warden.util.di.core import ProdConfigProvider
from warden.util.di.domain import ProdDomainProvider
from warden.util.di.infrastructure import (
    EmailProvider,
    OAuthProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdOAuthProvider,
    ProdPersistenceProvider,
    ProfileFetcherAggregatorProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    EmailProvider,
    OAuthProvider,
    PersistenceProvider,
    # Combines the per-provider profile fetchers
    ProfileFetcherAggregatorProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "EmailProvider",
    "OAuthProvider",
    "PersistenceProvider",
    "ProfileFetcherAggregatorProvider",
    # Infrastructure implementations
    "ProdEmailProvider",
    "ProdOAuthProvider",
    "ProdPersistenceProvider",
]
