"""Tests for search engine classification."""

import pytest

from meaning_words.data import EngineId
from meaning_words.engine import classify


@pytest.mark.parametrize(
    ("hostname", "expected"),
    [
        ("www.google.com", EngineId.GOOGLE),
        ("google.com", EngineId.GOOGLE),
        ("www.google.co.uk", EngineId.GOOGLE),
        ("google.de", EngineId.GOOGLE),
        ("WWW.GOOGLE.COM", EngineId.GOOGLE),
        ("bing.com", EngineId.BING),
        ("m.bing.com", EngineId.BING),
        ("www.Bing.com", EngineId.BING),
        ("duckduckgo.com", EngineId.DDG),
        ("html.duckduckgo.com", EngineId.DDG),
        ("example.com", EngineId.OTHER),
        ("notgoogle.com", EngineId.OTHER),
        ("bing.com.example.org", EngineId.OTHER),
        ("mybing.com", EngineId.OTHER),
        ("duckduckgo.org", EngineId.OTHER),
        ("", EngineId.OTHER),
        ("localhost", EngineId.OTHER),
        ("bing.com\n", EngineId.OTHER),
        ("www.google.com\n", EngineId.OTHER),
        ("duckduckgo.com\n", EngineId.OTHER),
        ("google.com evil", EngineId.OTHER),
    ],
)
def test_classify(hostname: str, expected: EngineId) -> None:
    assert classify(hostname) is expected


def test_google_takes_priority() -> None:
    # Matches both the google and the bing pattern.
    assert classify("bing.google.com") is EngineId.GOOGLE
