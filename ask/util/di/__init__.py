"""Dependency injection module."""

from typing import Iterable, Type

from ask.util.di.application import ProdApplicationProvider
from ask.util.di.base import COMPONENTS, Component, ProviderBase
from ask.util.di.core import ProdConfigProvider
from ask.util.di.domain import ProdDomainProvider
from ask.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable components: the base class is listed, implementations subclass it
    PersistenceProvider,
    NotificationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider listed in PROVIDERS.

    A base without subclasses is concrete and returned as is. Otherwise the
    subclass whose ``__is_mock__`` matches ``use_mock`` is returned, which
    means mock providers must have been imported before this is called.

    Raises:
        ValueError: If the requested implementation isn't defined
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for impl in subclasses:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def resolve_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the given components.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Provider instances ready for make_async_container

    Raises:
        ValueError: If a component name is unknown
    """
    mocked = set(mocked)
    unknown = mocked - set(COMPONENTS)
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "resolve_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
