"""Dependency injection module."""

from leaf.util.di.application import ProdApplicationProvider
from leaf.util.di.base import Component, ProviderBase, find_implementation
from leaf.util.di.core import ProdConfigProvider
from leaf.util.di.domain import ProdDomainProvider
from leaf.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and application wiring is always real; persistence can be
# swapped for in-memory repositories in tests
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Components that have a mock counterpart in PROVIDERS."""
    return {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Get the provider class to instantiate for a PROVIDERS entry.

    Concrete providers are returned as-is. Component bases resolve to the
    implementation registered for them.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether to use the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the requested implementation is not registered
    """
    component = base.__mock_component__
    if component is None:
        return base

    impl = find_implementation(component, use_mock)
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {component}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
