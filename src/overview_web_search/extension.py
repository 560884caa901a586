from __future__ import annotations

import logging

from overview_web_search.config import Settings
from overview_web_search.launcher import CommandLauncher, UrlLauncher
from overview_web_search.metadata import ExtensionMetadata
from overview_web_search.provider import WebSearchProvider
from overview_web_search.registry import SearchRegistry

logger = logging.getLogger(__name__)


class Extension:
    """Owns at most one registered `WebSearchProvider`.

    `enable` and `disable` are the only code paths that touch the registry,
    and both are idempotent. Registry errors propagate to the caller.
    """

    def __init__(
        self,
        *,
        metadata: ExtensionMetadata,
        registry: SearchRegistry,
        settings: Settings,
        launcher: UrlLauncher,
    ) -> None:
        self._metadata = metadata
        self._registry = registry
        self._settings = settings
        self._launcher = launcher
        self._provider: WebSearchProvider | None = None

    @property
    def metadata(self) -> ExtensionMetadata:
        return self._metadata

    @property
    def provider(self) -> WebSearchProvider | None:
        return self._provider

    def enable(self) -> None:
        if self._provider is not None:
            return

        provider = WebSearchProvider(
            provider_id=self._metadata.uuid,
            launcher=self._launcher,
            url_template=self._settings.url_template,
            encode_terms=self._settings.encode_terms,
            icon_name=self._settings.icon_name,
        )
        self._registry.register_provider(provider)
        self._provider = provider
        logger.info("Enabled %s", self._metadata.uuid)

    def disable(self) -> None:
        if self._provider is None:
            return

        self._registry.unregister_provider(self._provider)
        self._provider = None
        logger.info("Disabled %s", self._metadata.uuid)


def init(
    metadata: ExtensionMetadata,
    registry: SearchRegistry,
    settings: Settings | None = None,
    launcher: UrlLauncher | None = None,
) -> Extension:
    """Entry point the host calls once when the extension is loaded."""
    resolved_settings = settings or Settings()
    return Extension(
        metadata=metadata,
        registry=registry,
        settings=resolved_settings,
        launcher=launcher or CommandLauncher(resolved_settings.launch_command),
    )
