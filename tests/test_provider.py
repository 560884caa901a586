from __future__ import annotations

import pytest

from overview_web_search.base import Icon, ResultMeta, SearchProvider
from overview_web_search.provider import (
    RESULT_ID,
    WebSearchProvider,
    build_search_url,
)


class RecordingLauncher:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def open_url(self, url: str) -> None:
        self.urls.append(url)


class FailingLauncher:
    def open_url(self, url: str) -> None:
        raise OSError("no browser")


def _provider(
    launcher: RecordingLauncher | FailingLauncher | None = None, **kwargs: object
) -> WebSearchProvider:
    return WebSearchProvider(
        provider_id="ddg@test",
        launcher=launcher or RecordingLauncher(),
        **kwargs,  # type: ignore[arg-type]
    )


def test_provider_matches_search_provider_protocol() -> None:
    assert isinstance(_provider(), SearchProvider)


def test_provider_identity_is_stable() -> None:
    provider = _provider()

    assert provider.id == "ddg@test"
    assert provider.id == provider.id
    assert provider.app_info is None
    assert provider.can_launch_search is False


@pytest.mark.anyio
@pytest.mark.parametrize("terms", [[], ["gnome"], ["gnome", "shell", "extensions"]])
async def test_initial_result_set_is_single_web_search(terms: list[str]) -> None:
    provider = _provider()

    assert await provider.get_initial_result_set(terms) == ["Web Search"]


@pytest.mark.anyio
async def test_initial_result_set_ignores_cancellable() -> None:
    provider = _provider()

    assert await provider.get_initial_result_set(["x"], object()) == [RESULT_ID]


@pytest.mark.anyio
@pytest.mark.parametrize("previous", [[], ["Web Search"], ["a", "b", "c"]])
async def test_subsearch_matches_initial_search(previous: list[str]) -> None:
    provider = _provider()
    terms = ["gnome", "shell"]

    refined = await provider.get_subsearch_result_set(previous, terms)

    assert refined == await provider.get_initial_result_set(terms)


@pytest.mark.parametrize("max_results", [0, 1, 2, 3, 4, 10])
def test_filter_results_keeps_prefix(max_results: int) -> None:
    provider = _provider()
    results = ["a", "b", "c"]

    filtered = provider.filter_results(results, max_results)

    assert len(filtered) == min(len(results), max_results)
    assert filtered == results[:max_results]


def test_filter_results_returns_same_list_when_under_limit() -> None:
    provider = _provider()
    results = ["a", "b", "c"]

    filtered = provider.filter_results(results, 10)

    assert filtered is results
    assert filtered == ["a", "b", "c"]


def test_filter_results_empty_list() -> None:
    assert _provider().filter_results([], 0) == []


@pytest.mark.anyio
async def test_result_metas_follow_input_order_and_length() -> None:
    provider = _provider()
    ids = ["Web Search", "unknown", "Web Search"]

    metas = await provider.get_result_metas(ids)

    assert [meta.id for meta in metas] == ids
    for meta in metas:
        assert meta.name == "Web Search"
        assert meta.description == "Launch web search"
        assert meta.clipboard_text == "Launch web search"


@pytest.mark.anyio
async def test_result_metas_empty_input() -> None:
    assert await _provider().get_result_metas([]) == []


@pytest.mark.anyio
async def test_result_meta_icon_is_sized_by_caller() -> None:
    provider = _provider()

    (meta,) = await provider.get_result_metas([RESULT_ID])

    assert meta.create_icon(32) == Icon(icon_name="web-browser", width=32, height=32)
    assert meta.create_icon(64).width == 64


@pytest.mark.anyio
async def test_result_meta_uses_configured_icon_name() -> None:
    provider = _provider(icon_name="applications-internet")

    (meta,) = await provider.get_result_metas([RESULT_ID])

    assert meta.create_icon(16).icon_name == "applications-internet"


def test_activate_result_opens_joined_terms() -> None:
    launcher = RecordingLauncher()
    provider = _provider(launcher)

    provider.activate_result(RESULT_ID, ["gnome", "shell"])

    assert launcher.urls == ["https://www.duckduckgo.com/?q=gnome+shell"]


def test_activate_result_with_no_terms() -> None:
    launcher = RecordingLauncher()
    provider = _provider(launcher)

    provider.activate_result(RESULT_ID, [])

    assert launcher.urls == ["https://www.duckduckgo.com/?q="]


def test_activate_result_swallows_launch_failure(
    caplog: pytest.LogCaptureFixture,
) -> None:
    provider = _provider(FailingLauncher())

    provider.activate_result(RESULT_ID, ["gnome"])

    assert "Web search launch failed" in caplog.text


def test_launch_search_and_result_object_are_noops() -> None:
    launcher = RecordingLauncher()
    provider = _provider(launcher)

    assert provider.launch_search(["gnome"]) is None
    assert provider.create_result_object(_meta()) is None
    assert launcher.urls == []


def test_build_search_url_keeps_terms_verbatim() -> None:
    url = build_search_url(["c++", "a&b"])

    assert url == "https://www.duckduckgo.com/?q=c+++a&b"


def test_build_search_url_encodes_when_requested() -> None:
    url = build_search_url(["c++", "a&b", "x y"], encode=True)

    assert url == "https://www.duckduckgo.com/?q=c%2B%2B+a%26b+x+y"


def test_build_search_url_custom_template() -> None:
    url = build_search_url(
        ["gnome"], "https://duckduckgo.com/html/?q={query}&kl=us-en"
    )

    assert url == "https://duckduckgo.com/html/?q=gnome&kl=us-en"


def _meta() -> ResultMeta:
    return ResultMeta(
        id=RESULT_ID,
        name="Web Search",
        description="Launch web search",
        clipboard_text="Launch web search",
        create_icon=lambda size: Icon(icon_name="web-browser", width=size, height=size),
    )
