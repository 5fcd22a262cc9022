"""Quick-search item source over game names, notes and descriptions."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from notesearch.config.schema import SearchConfig
from notesearch.library.models import GameRecord, LibraryStore
from notesearch.search.builder import ResultBuilder
from notesearch.search.matcher import matches
from notesearch.search.models import ResultItem
from notesearch.search.query import normalize_query


@dataclass(slots=True)
class RecordOutcome:
    """Result of processing one record: an item, nothing, or an error."""

    record: GameRecord
    item: ResultItem | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GameNotesSearchSource:
    """Search source registered with the host's quick-search.

    Only the async entry point produces results. The sync entry points
    always return nothing so the host does not show every hit twice.
    """

    def __init__(
        self,
        library: LibraryStore,
        config: SearchConfig | None = None,
        select_game: Callable[[Any], Any] | None = None,
    ):
        self.library = library
        self.config = config or SearchConfig()
        self.builder = ResultBuilder(library, self.config, select_game=select_game)

    @property
    def name(self) -> str:
        return self.config.display_name

    @property
    def keyword(self) -> str | None:
        return self.config.keyword

    @property
    def priority(self) -> int:
        return self.config.priority

    def get_items(self, term: str | None = None) -> list[ResultItem]:
        return []

    async def get_items_async(
        self,
        term: str | None,
        prior_candidates: Sequence[Any] | None = None,
    ) -> list[ResultItem]:
        """Search the library for ``term``; never raises."""
        logger.debug("NotesSearch: term='{}'", term)
        try:
            return self.search(term)
        except Exception as e:
            logger.error("NotesSearch: search failed: {}", e)
            return []

    def search(self, term: str | None) -> list[ResultItem]:
        needle = normalize_query(term, self.config.keyword)
        if needle is None:
            return []

        results: list[ResultItem] = []
        seen: set[Hashable] = set()
        for record in self.library.games():
            if record is None:
                continue
            try:
                if record.id in seen:
                    continue
                seen.add(record.id)
            except (AttributeError, TypeError) as e:
                logger.warning("NotesSearch: skip record without usable id: {}", e)
                continue

            outcome = self._process(record, needle)
            if not outcome.ok:
                logger.warning(
                    "NotesSearch: skip game '{}' ({}): {}", _record_name(record), record.id, outcome.error
                )
            elif outcome.item is not None:
                results.append(outcome.item)
        return results

    def _process(self, record: GameRecord, needle: str) -> RecordOutcome:
        try:
            if not matches(record, needle, include_description=self.config.include_description):
                return RecordOutcome(record)
            return RecordOutcome(record, item=self.builder.build(record))
        except Exception as e:
            return RecordOutcome(record, error=e)


def _record_name(record: GameRecord) -> str | None:
    try:
        return getattr(record, "name", None)
    except Exception:
        return None
