from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class OverviewWebSearchError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Icon:
    icon_name: str
    width: int
    height: int


@dataclass(frozen=True)
class ResultMeta:
    id: str
    name: str
    description: str
    clipboard_text: str
    create_icon: Callable[[int], Icon]


@runtime_checkable
class SearchProvider(Protocol):
    """What the overview search registry expects from a result source.

    The host calls the query methods as the user types, then
    `activate_result` when a result is picked. `cancellable` arguments are
    part of the host calling convention; providers are free to ignore them.
    """

    @property
    def id(self) -> str: ...

    @property
    def app_info(self) -> Any | None: ...

    @property
    def can_launch_search(self) -> bool: ...

    async def get_initial_result_set(
        self, terms: Sequence[str], cancellable: object | None = None
    ) -> list[str]: ...

    async def get_subsearch_result_set(
        self,
        results: Sequence[str],
        terms: Sequence[str],
        cancellable: object | None = None,
    ) -> list[str]: ...

    def filter_results(self, results: list[str], max_results: int) -> list[str]: ...

    async def get_result_metas(
        self, results: Sequence[str], cancellable: object | None = None
    ) -> list[ResultMeta]: ...

    def activate_result(self, result: str, terms: Sequence[str]) -> None: ...

    def launch_search(self, terms: Sequence[str]) -> None: ...

    def create_result_object(self, meta: ResultMeta) -> Any | None: ...
