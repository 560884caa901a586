from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from overview_web_search.base import OverviewWebSearchError

_REQUIRED_KEYS = ("uuid", "name")


class MetadataError(OverviewWebSearchError):
    pass


@dataclass(frozen=True)
class ExtensionMetadata:
    uuid: str
    name: str
    description: str = ""
    url: str | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> ExtensionMetadata:
        missing = [
            key
            for key in _REQUIRED_KEYS
            if not isinstance(payload.get(key), str) or not payload[key].strip()
        ]
        if missing:
            raise MetadataError(
                f"Extension metadata is missing: {', '.join(missing)}"
            )

        description = payload.get("description")
        url = payload.get("url")
        return cls(
            uuid=payload["uuid"].strip(),
            name=payload["name"].strip(),
            description=description if isinstance(description, str) else "",
            url=url if isinstance(url, str) and url else None,
        )

    @classmethod
    def from_file(cls, path: Path) -> ExtensionMetadata:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise MetadataError(f"Could not read {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise MetadataError(f"{path} does not contain a JSON object.")
        return cls.from_dict(payload)


def load_bundled_metadata() -> ExtensionMetadata:
    """Metadata shipped alongside the package."""
    return ExtensionMetadata.from_file(Path(__file__).with_name("metadata.json"))
