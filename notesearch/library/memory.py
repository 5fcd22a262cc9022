"""List-backed library store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from notesearch.library.models import GameRecord, IconResolutionError


class InMemoryLibrary:
    """Library store over a plain list of records.

    Icon tokens are stored relative to ``files_dir`` unless already absolute.
    """

    def __init__(
        self,
        records: Iterable[GameRecord | None] | None = None,
        files_dir: Path | str | None = None,
    ):
        self._records: list[GameRecord | None] = list(records or [])
        self.files_dir = Path(files_dir) if files_dir is not None else None

    def games(self) -> Iterator[GameRecord | None]:
        return iter(self._records)

    def add(self, record: GameRecord | None) -> None:
        self._records.append(record)

    def get_full_file_path(self, token: str | None) -> str | None:
        if token is None or not token.strip():
            return None
        if "\x00" in token:
            raise IconResolutionError(f"invalid icon token: {token!r}")

        path = Path(token)
        if path.is_absolute():
            return str(path)
        if self.files_dir is None:
            return token
        return str(self.files_dir / path)

    def __len__(self) -> int:
        return len(self._records)
