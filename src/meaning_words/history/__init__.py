"""History stores and chunked history sources."""

from meaning_words.history.base import HistorySource, HistoryStore
from meaning_words.history.chromium import ChromiumHistoryStore
from meaning_words.history.json_file import HistoryEntry, JsonHistoryStore, load_history_json
from meaning_words.history.memory import InMemoryHistoryStore
from meaning_words.history.windowed import WindowedHistorySource

__all__ = [
    "ChromiumHistoryStore",
    "HistoryEntry",
    "HistorySource",
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonHistoryStore",
    "WindowedHistorySource",
    "load_history_json",
]
