"""Keyword list codec — keywords are stored as one comma-joined string."""

from collections.abc import Iterable

KEYWORD_SEPARATOR = ","


def join_keywords(keywords: Iterable[str]) -> str:
    """Serialize keywords for storage, preserving order and duplicates."""
    return KEYWORD_SEPARATOR.join(keywords)


def parse_keywords(raw: str | None) -> list[str]:
    """Parse a stored keyword string back into trimmed keywords.

    An empty or missing value yields an empty list, never ``[""]``.
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(KEYWORD_SEPARATOR)]
