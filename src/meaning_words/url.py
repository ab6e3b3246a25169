"""URL handling utilities."""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote, unquote_plus, urlparse

logger = logging.getLogger(__name__)

QUERY_PARAM = "q"

# A "%" not followed by two hex digits.
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def extract_hostname(url: str) -> str | None:
    """Extract the lowercased hostname from a URL.

    Args:
        url: The URL to extract the hostname from.

    Returns:
        The hostname, or None if the URL has no network location or cannot
        be parsed.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        logger.debug(f"Could not parse url {url!r}")
        return None
    return hostname or None


def extract_query(url: str) -> str:
    """Extract the decoded ``q`` query parameter from a search URL.

    The first raw ``q`` value is taken, literal ``+`` characters become
    spaces, and the result is percent-decoded as UTF-8. Malformed escapes
    such as a bare ``%`` make the whole value undecodable.

    Args:
        url: A search result page URL.

    Returns:
        The decoded query, or an empty string if the parameter is absent or
        the URL cannot be parsed or decoded.
    """
    try:
        raw_query = urlparse(url).query
        for pair in raw_query.split("&"):
            name, _, value = pair.partition("=")
            if unquote_plus(name) == QUERY_PARAM:
                if MALFORMED_ESCAPE.search(value):
                    return ""
                return unquote(value.replace("+", " "), errors="strict")
    except (ValueError, UnicodeDecodeError):
        return ""
    return ""


def shorten_url(url: str, max_length: int = 48) -> str:
    """Shorten a URL for display as ``host/path`` with an ellipsis for queries.

    Args:
        url: URL to shorten.
        max_length: Maximum length of the returned string.

    Returns:
        A display string no longer than ``max_length``.
    """
    try:
        parsed = urlparse(url)
        text = f"{parsed.hostname}{parsed.path}{'?…' if parsed.query else ''}"
        if not parsed.hostname:
            text = url
    except ValueError:
        text = url
    if len(text) > max_length:
        return text[: max_length - 1] + "…"
    return text
