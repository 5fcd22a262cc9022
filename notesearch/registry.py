"""In-process registry of quick-search item sources."""

from __future__ import annotations

from typing import Any


class RegistrationError(Exception):
    """Raised when a key is already taken by a different source."""


class SearchSourceRegistry:
    """
    Registry of named item sources queried by the host's quick-search.

    Adding the same source under the same key twice is a no-op.
    """

    def __init__(self):
        self._sources: dict[str, Any] = {}

    def add_item_source(self, key: str, source: Any) -> None:
        existing = self._sources.get(key)
        if existing is source:
            return
        if existing is not None:
            raise RegistrationError(f"item source already registered: {key}")
        self._sources[key] = source

    def remove_item_source(self, key: str) -> None:
        self._sources.pop(key, None)

    def get(self, key: str) -> Any | None:
        return self._sources.get(key)

    def sources(self) -> list[tuple[str, Any]]:
        """Registered sources, highest priority first."""
        return sorted(
            self._sources.items(),
            key=lambda kv: (-getattr(kv[1], "priority", 0), kv[0]),
        )

    def __contains__(self, key: str) -> bool:
        return key in self._sources

    def __len__(self) -> int:
        return len(self._sources)
