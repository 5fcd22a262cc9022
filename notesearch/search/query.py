"""Query term normalization."""


def normalize_query(raw: str | None, keyword: str | None = None) -> str | None:
    """
    Turn a raw query into the term to search for.

    Strips surrounding whitespace and an optional ``keyword`` prefix
    ("note dark" or "notedark" with keyword "note"). The prefix match is
    case-insensitive.

    Returns:
        The canonical term, or None when nothing is left to search for.
    """
    if raw is None or not raw.strip():
        return None

    term = raw.strip()
    if keyword:
        lowered = term.lower()
        prefix = keyword.lower()
        if lowered.startswith(prefix + " "):
            term = term[len(keyword) + 1:]
        elif lowered.startswith(prefix):
            term = term[len(keyword):]
        term = term.strip()

    return term or None
