"""Case-insensitive substring matching over record text fields."""

from notesearch.library.models import GameRecord

MATCH_FIELDS: tuple[str, ...] = ("name", "notes", "description")


def enabled_fields(include_description: bool = True) -> tuple[str, ...]:
    if include_description:
        return MATCH_FIELDS
    return tuple(f for f in MATCH_FIELDS if f != "description")


def _contains(text: str | None, needle: str) -> bool:
    if not text or not isinstance(text, str):
        return False
    return needle in text.casefold()


def matches(record: GameRecord, term: str, *, include_description: bool = True) -> bool:
    """Return True when ``term`` occurs in any enabled text field of ``record``."""
    needle = term.casefold()
    return any(
        _contains(getattr(record, field_name, None), needle)
        for field_name in enabled_fields(include_description)
    )
