"""Turn matching library records into search result items."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path, PureWindowsPath
from typing import Any
from urllib.parse import urlsplit

from loguru import logger

from notesearch.config.schema import SearchConfig
from notesearch.library.models import GameRecord, LibraryStore
from notesearch.search.models import ResultItem, SearchKey, SelectAction

EMPTY_PLAYTIME = "0h0min"


def format_playtime(minutes: Any) -> str:
    """Format a playtime in minutes as ``<h>h<m>min``; bad input counts as zero."""
    try:
        total = max(0, int(minutes or 0))
    except (TypeError, ValueError, OverflowError):
        total = 0
    hours, rest = divmod(total, 60)
    return f"{hours}h{rest}min"


def join_platforms(platforms: Any) -> str:
    names = (str(p).strip() for p in (platforms or []) if p is not None)
    return ", ".join(n for n in names if n)


def install_status_label(installed: bool, config: SearchConfig) -> str:
    return config.installed_label if installed else config.not_installed_label


def to_icon_uri(path: str | None) -> str | None:
    """Return an absolute URI for ``path``, or None if it is not absolute."""
    if not path or not path.strip():
        return None
    path = path.strip()

    parts = urlsplit(path)
    if len(parts.scheme) > 1 and (parts.netloc or parts.scheme == "file"):
        return path

    if PureWindowsPath(path).is_absolute() and PureWindowsPath(path).drive:
        return PureWindowsPath(path).as_uri()
    local = Path(path)
    if local.is_absolute():
        return local.as_uri()
    return None


class ResultBuilder:
    """Build ``ResultItem`` objects for records that matched a query."""

    def __init__(
        self,
        library: LibraryStore,
        config: SearchConfig | None = None,
        select_game: Callable[[Any], Any] | None = None,
    ):
        self.library = library
        self.config = config or SearchConfig()
        self._select_game = select_game

    def build(self, record: GameRecord) -> ResultItem:
        item = ResultItem(
            game=record,
            keys=self.build_keys(record),
            actions=[self.build_action(record)],
            playtime_label=self.config.playtime_label,
        )
        item.icon = self._resolve_icon(record)
        self._fill_display(item, record)
        return item

    def build_keys(self, record: GameRecord) -> list[SearchKey]:
        weight = self.config.key_weight
        keys = [SearchKey(record.name or "", weight)]
        if record.notes and record.notes.strip():
            keys.append(SearchKey(record.notes, weight))
        if self.config.include_description and record.description and record.description.strip():
            keys.append(SearchKey(record.description, weight))
        return keys

    def build_action(self, record: GameRecord) -> SelectAction:
        record_id = record.id

        def _select() -> Any:
            if self._select_game is None:
                logger.debug("NotesSearch: no main view, cannot select {}", record_id)
                return None
            return self._select_game(record_id)

        return SelectAction(name=self.config.action_name, callback=_select, close_after_execute=True)

    def _resolve_icon(self, record: GameRecord) -> str | None:
        if not record.icon:
            return None
        try:
            return to_icon_uri(self.library.get_full_file_path(record.icon))
        except Exception as e:
            logger.debug("NotesSearch: icon dropped for {} ({}): {}", record.name, record.id, e)
            return None

    def _fill_display(self, item: ResultItem, record: GameRecord) -> None:
        item.platform = self._guarded(record, "platform", lambda: join_platforms(record.platforms), "")
        item.playtime_text = self._guarded(
            record, "playtime", lambda: format_playtime(record.playtime), EMPTY_PLAYTIME
        )
        item.install_status = self._guarded(
            record,
            "install status",
            lambda: install_status_label(bool(record.is_installed), self.config),
            "",
        )

    @staticmethod
    def _guarded(record: GameRecord, what: str, compute: Callable[[], str], default: str) -> str:
        try:
            return compute()
        except Exception as e:
            logger.debug("NotesSearch: {} reset for {} ({}): {}", what, record.name, record.id, e)
            return default
