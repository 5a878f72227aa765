"""Dependency injection module."""

from typing import Type

from pinwall.util.di.application import ProdApplicationProvider
from pinwall.util.di.base import Component, ProviderBase
from pinwall.util.di.core import ProdConfigProvider
from pinwall.util.di.domain import ProdDomainProvider
from pinwall.util.di.infrastructure import (
    GitHubProvider,
    MemoryPersistenceProvider,
    PersistenceProvider,
    ProdGitHubProvider,
    ProdPersistenceProvider,
)
from pinwall.util.di.interface import ProdInterfaceProvider

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdInterfaceProvider,
    # Infrastructure components (mockable)
    GitHubProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: concrete provider, used directly
    - Has subclasses: mockable component, selected by the __is_mock__ flag

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
    "ProdInterfaceProvider",
    # Infrastructure base classes
    "GitHubProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "MemoryPersistenceProvider",
    "ProdGitHubProvider",
    "ProdPersistenceProvider",
]
