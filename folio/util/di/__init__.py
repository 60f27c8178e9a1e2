"""Dependency injection module."""

from typing import Type

from folio.util.di.application import ProdApplicationProvider
from folio.util.di.base import Component, ProviderBase
from folio.util.di.core import ProdConfigProvider
from folio.util.di.domain import ProdDomainProvider
from folio.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Concrete providers are returned as is. For a mockable component the
    subclass whose ``__is_mock__`` matches ``use_mock`` is chosen.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    if not base.is_mockable():
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")

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
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
