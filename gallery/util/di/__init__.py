"""Dependency injection module."""

from typing import Type

from gallery.util.di.application import ProdApplicationProvider
from gallery.util.di.base import Component, ProviderBase
from gallery.util.di.core import ProdConfigProvider
from gallery.util.di.domain import ProdDomainProvider
from gallery.util.di.infrastructure import (
    DiscordProvider,
    GithubProvider,
    GoogleProvider,
    OAuthAggregatorProvider,
    PersistenceProvider,
    ProdDiscordProvider,
    ProdGithubProvider,
    ProdGoogleProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    DiscordProvider,
    GithubProvider,
    GoogleProvider,
    PersistenceProvider,
    # OAuth aggregator (combines all OAuth clients)
    OAuthAggregatorProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for `base`.

    A base without subclasses is concrete and used as-is. A base with
    subclasses is a swappable component; the subclass whose `__is_mock__`
    matches `use_mock` is returned.

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
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "DiscordProvider",
    "GithubProvider",
    "GoogleProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdDiscordProvider",
    "ProdGithubProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
