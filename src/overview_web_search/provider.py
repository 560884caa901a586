from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from urllib.parse import quote_plus

from overview_web_search.base import Icon, ResultMeta
from overview_web_search.config import DEFAULT_ICON_NAME, DEFAULT_URL_TEMPLATE
from overview_web_search.launcher import UrlLauncher

logger = logging.getLogger(__name__)

RESULT_ID = "Web Search"
RESULT_NAME = "Web Search"
RESULT_DESCRIPTION = "Launch web search"


def build_search_url(
    terms: Sequence[str],
    template: str = DEFAULT_URL_TEMPLATE,
    *,
    encode: bool = False,
) -> str:
    """Join `terms` with '+' into the search template.

    Terms go in verbatim unless `encode` is set, so characters such as '&'
    or '#' reach the browser unescaped.
    """
    parts = [quote_plus(term) for term in terms] if encode else list(terms)
    return template.replace("{query}", "+".join(parts))


def _make_icon(icon_name: str, size: int) -> Icon:
    return Icon(icon_name=icon_name, width=size, height=size)


class WebSearchProvider:
    """Overview provider that always offers a single web search result."""

    def __init__(
        self,
        *,
        provider_id: str,
        launcher: UrlLauncher,
        url_template: str = DEFAULT_URL_TEMPLATE,
        encode_terms: bool = False,
        icon_name: str = DEFAULT_ICON_NAME,
    ) -> None:
        self._id = provider_id
        self._launcher = launcher
        self._url_template = url_template
        self._encode_terms = encode_terms
        self._icon_name = icon_name

    @property
    def id(self) -> str:
        return self._id

    @property
    def app_info(self) -> None:
        return None

    @property
    def can_launch_search(self) -> bool:
        return False

    async def get_initial_result_set(
        self, terms: Sequence[str], cancellable: object | None = None
    ) -> list[str]:
        return [RESULT_ID]

    async def get_subsearch_result_set(
        self,
        results: Sequence[str],
        terms: Sequence[str],
        cancellable: object | None = None,
    ) -> list[str]:
        return await self.get_initial_result_set(terms, cancellable)

    def filter_results(self, results: list[str], max_results: int) -> list[str]:
        if len(results) <= max_results:
            return results
        return results[:max_results]

    async def get_result_metas(
        self, results: Sequence[str], cancellable: object | None = None
    ) -> list[ResultMeta]:
        create_icon = partial(_make_icon, self._icon_name)
        return [
            ResultMeta(
                id=identifier,
                name=RESULT_NAME,
                description=RESULT_DESCRIPTION,
                clipboard_text=RESULT_DESCRIPTION,
                create_icon=create_icon,
            )
            for identifier in results
        ]

    def search_url(self, terms: Sequence[str]) -> str:
        return build_search_url(
            terms, self._url_template, encode=self._encode_terms
        )

    def activate_result(self, result: str, terms: Sequence[str]) -> None:
        url = self.search_url(terms)
        logger.debug("Activating %r with %s", result, url)
        try:
            self._launcher.open_url(url)
        except Exception:
            logger.warning("Web search launch failed for %s", url, exc_info=True)

    def launch_search(self, terms: Sequence[str]) -> None:
        return None

    def create_result_object(self, meta: ResultMeta) -> None:
        return None
