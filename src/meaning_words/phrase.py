"""Matching of "<phrase> meaning" search queries."""

import re

MEANING_PATTERN = re.compile(r"(.*)\s+meaning", re.IGNORECASE)


def match_meaning_phrase(query: str) -> str | None:
    """Extract the phrase from a query of the form ``<phrase> meaning``.

    The trailing keyword matches in any case and the returned phrase is
    lowercased, so "Foo Meaning" and "foo MEANING" share one key. Whitespace
    inside the phrase is kept as typed.

    Args:
        query: Decoded search query.

    Returns:
        The lowercased phrase, or None if the query does not end with
        "meaning" or nothing precedes it.

    Examples:
        >>> match_meaning_phrase("Quixotic Meaning")
        'quixotic'
        >>> match_meaning_phrase("meaning") is None
        True
    """
    if not query:
        return None
    match = MEANING_PATTERN.fullmatch(query.strip())
    if match is None:
        return None
    phrase = match.group(1).strip()
    return phrase.lower() if phrase else None
