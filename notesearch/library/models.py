"""Game record model and the library store contract."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


class IconResolutionError(Exception):
    """Raised when an icon token cannot be turned into a file path."""


@dataclass(slots=True)
class GameRecord:
    """Snapshot of one game entry owned by the host library."""

    id: Hashable
    name: str | None = None
    notes: str | None = None
    description: str | None = None
    platforms: list[str | None] | None = field(default_factory=list)
    playtime: int | None = 0
    is_installed: bool = False
    icon: str | None = None


@runtime_checkable
class LibraryStore(Protocol):
    """Read-only view over the host's game collection."""

    def games(self) -> Iterable[GameRecord | None]:
        """Iterate records in the store's native order."""
        ...

    def get_full_file_path(self, token: str | None) -> str | None:
        """Resolve a stored icon token to an absolute path."""
        ...
