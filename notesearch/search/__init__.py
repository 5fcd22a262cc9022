"""Query normalization, matching and result assembly."""

from notesearch.search.builder import ResultBuilder, format_playtime
from notesearch.search.matcher import matches
from notesearch.search.models import ResultItem, ScoreMode, SearchKey, SelectAction
from notesearch.search.query import normalize_query
from notesearch.search.source import GameNotesSearchSource, RecordOutcome

__all__ = [
    "GameNotesSearchSource",
    "RecordOutcome",
    "ResultBuilder",
    "ResultItem",
    "ScoreMode",
    "SearchKey",
    "SelectAction",
    "format_playtime",
    "matches",
    "normalize_query",
]
