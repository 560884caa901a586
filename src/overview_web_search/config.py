from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass

from overview_web_search.launcher import DEFAULT_LAUNCH_COMMAND

DEFAULT_URL_TEMPLATE = "https://www.duckduckgo.com/?q={query}"
DEFAULT_ICON_NAME = "web-browser"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    url_template: str = DEFAULT_URL_TEMPLATE
    encode_terms: bool = False
    launch_command: tuple[str, ...] = DEFAULT_LAUNCH_COMMAND
    icon_name: str = DEFAULT_ICON_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            url_template=_parse_url_template(os.getenv("WEB_SEARCH_URL_TEMPLATE")),
            encode_terms=_parse_bool(os.getenv("WEB_SEARCH_ENCODE_TERMS")),
            launch_command=_parse_launch_command(
                os.getenv("WEB_SEARCH_LAUNCH_COMMAND")
            ),
            icon_name=(os.getenv("WEB_SEARCH_ICON_NAME") or "").strip()
            or DEFAULT_ICON_NAME,
            log_level=_parse_log_level(os.getenv("WEB_SEARCH_LOG_LEVEL")),
        )


def _parse_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_url_template(value: str | None) -> str:
    if value is None or not value.strip():
        return DEFAULT_URL_TEMPLATE

    stripped = value.strip()
    if "{query}" not in stripped:
        raise RuntimeError(
            "Invalid WEB_SEARCH_URL_TEMPLATE. Expected a '{query}' placeholder."
        )
    return stripped


def _parse_launch_command(value: str | None) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_LAUNCH_COMMAND

    try:
        parts = tuple(shlex.split(value))
    except ValueError as exc:
        raise RuntimeError(f"Invalid WEB_SEARCH_LAUNCH_COMMAND: {exc}") from exc
    if not parts:
        raise RuntimeError("Invalid WEB_SEARCH_LAUNCH_COMMAND. Command is empty.")
    return parts


def _parse_log_level(value: str | None) -> str:
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL

    normalized = value.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise RuntimeError(f"Invalid WEB_SEARCH_LOG_LEVEL '{value}'.")
    return normalized
