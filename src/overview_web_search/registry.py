from __future__ import annotations

import logging
from typing import Protocol

from overview_web_search.base import OverviewWebSearchError, SearchProvider

logger = logging.getLogger(__name__)


class RegistryError(OverviewWebSearchError):
    pass


class SearchRegistry(Protocol):
    def register_provider(self, provider: SearchProvider) -> None: ...

    def unregister_provider(self, provider: SearchProvider) -> None: ...


class ProviderRegistry:
    """In-memory overview registry, keyed by provider id."""

    def __init__(self) -> None:
        self._providers: dict[str, SearchProvider] = {}

    def register_provider(self, provider: SearchProvider) -> None:
        if provider.id in self._providers:
            raise RegistryError(f"Provider '{provider.id}' is already registered.")
        self._providers[provider.id] = provider
        logger.info("Registered search provider %s", provider.id)

    def unregister_provider(self, provider: SearchProvider) -> None:
        if self._providers.get(provider.id) is not provider:
            raise RegistryError(f"Provider '{provider.id}' is not registered.")
        del self._providers[provider.id]
        logger.info("Unregistered search provider %s", provider.id)

    def get_provider(self, provider_id: str) -> SearchProvider:
        if provider_id not in self._providers:
            raise RegistryError(
                f"Provider '{provider_id}' not found. "
                f"Available: {list(self._providers.keys())}"
            )
        return self._providers[provider_id]

    def list_providers(self) -> list[str]:
        return list(self._providers.keys())

    def providers(self) -> list[SearchProvider]:
        return list(self._providers.values())
