"""Dependency injection wiring for UniHub.

``PROVIDERS`` lists every provider in resolution order. Config, domain and
application providers are concrete; persistence is a mockable component
whose production implementation talks to PostgreSQL.
"""

from typing import Type

from unihub.util.di.application import ProdApplicationProvider
from unihub.util.di.base import Component, ProviderBase
from unihub.util.di.core import ProdConfigProvider
from unihub.util.di.domain import ProdDomainProvider
from unihub.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {base.__mock_component__ for base in PROVIDERS if base.is_mockable()}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Concrete providers resolve to themselves. Mockable components resolve
    to their mock or production subclass.

    Raises:
        ValueError: If the component lacks the requested implementation
    """
    if not base.is_mockable():
        return base

    impl = base.implementation(use_mock)
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return impl


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
