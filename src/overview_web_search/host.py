from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from overview_web_search.base import ResultMeta, SearchProvider
from overview_web_search.registry import ProviderRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5


@dataclass(frozen=True)
class ProviderResults:
    provider_id: str
    metas: tuple[ResultMeta, ...]

    @property
    def result_ids(self) -> list[str]:
        return [meta.id for meta in self.metas]


class OverviewSearch:
    """Drives registered providers the way the shell overview does.

    Each query asks every provider for ids, truncates them with the
    provider's own `filter_results`, then fetches display metadata.
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry

    async def search(
        self, terms: Sequence[str], max_results: int = DEFAULT_MAX_RESULTS
    ) -> list[ProviderResults]:
        collected: list[ProviderResults] = []
        for provider in self._registry.providers():
            ids = await provider.get_initial_result_set(terms)
            collected.append(
                await self._describe(provider, ids, max_results=max_results)
            )
        return collected

    async def refine(
        self,
        previous: Sequence[ProviderResults],
        terms: Sequence[str],
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[ProviderResults]:
        previous_ids: Mapping[str, list[str]] = {
            item.provider_id: item.result_ids for item in previous
        }
        collected: list[ProviderResults] = []
        for provider in self._registry.providers():
            ids = await provider.get_subsearch_result_set(
                previous_ids.get(provider.id, []), terms
            )
            collected.append(
                await self._describe(provider, ids, max_results=max_results)
            )
        return collected

    def activate(self, provider_id: str, result_id: str, terms: Sequence[str]) -> None:
        provider = self._registry.get_provider(provider_id)
        logger.info("Activating %r from %s", result_id, provider_id)
        provider.activate_result(result_id, terms)

    async def _describe(
        self, provider: SearchProvider, ids: list[str], *, max_results: int
    ) -> ProviderResults:
        limited = provider.filter_results(ids, max_results)
        metas = await provider.get_result_metas(limited)
        return ProviderResults(provider_id=provider.id, metas=tuple(metas))
