"""Search engine classification by hostname."""

import re

from meaning_words.data import EngineId

# Checked in order; the first pattern that matches wins.
# Anchored with \Z, so a trailing newline or whitespace never matches.
ENGINE_PATTERNS: tuple[tuple[EngineId, re.Pattern[str]], ...] = (
    (EngineId.GOOGLE, re.compile(r"(^|\.)google\.[^/\s]+\Z", re.IGNORECASE)),
    (EngineId.BING, re.compile(r"(^|\.)bing\.com\Z", re.IGNORECASE)),
    (EngineId.DDG, re.compile(r"(^|\.)duckduckgo\.com\Z", re.IGNORECASE)),
)


def classify(hostname: str) -> EngineId:
    """Classify a hostname as one of the supported search engines.

    Args:
        hostname: Hostname such as ``www.google.co.uk``.

    Returns:
        The matching engine, or ``EngineId.OTHER`` if none matches.
    """
    for engine, pattern in ENGINE_PATTERNS:
        if pattern.search(hostname):
            return engine
    return EngineId.OTHER
