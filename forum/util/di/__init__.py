"""Dependency injection wiring.

Every provider class in ``PROVIDERS`` is installed into the container.
Concrete providers are installed as they are; component bases (those
with a ``__mock_component__``) are swapped for their production or mock
subclass.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdPusherProvider,
    PusherProvider,
)
from forum.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Components (mock implementations live under tests/di)
    PersistenceProvider,
    PusherProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Install the mock implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = {
        getattr(sub, "__is_mock__", False): sub for sub in base.__subclasses__()
    }
    if not implementations:
        return base

    impl = implementations.get(use_mock)
    if impl is None:
        component = base.__mock_component__ or base.__name__
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(f"{component} has no {kind} provider")
    return impl


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdPusherProvider",
    "ProviderBase",
    "PusherProvider",
    "get_provider",
]
