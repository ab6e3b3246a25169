"""meaning-words: find the words you looked up with "<word> meaning" searches."""

from meaning_words.aggregator import QueryAggregator
from meaning_words.config import MeaningWordsConfig, create_from_config, load_config
from meaning_words.data import (
    ALL_ENGINES,
    MAX_EXAMPLES,
    AggregateResult,
    EngineId,
    HistoryRecord,
    ScanOptions,
    ScanStats,
)
from meaning_words.engine import classify
from meaning_words.export import load_json, rank, to_csv, to_json, write_csv, write_json
from meaning_words.history import (
    ChromiumHistoryStore,
    HistorySource,
    HistoryStore,
    InMemoryHistoryStore,
    JsonHistoryStore,
    WindowedHistorySource,
)
from meaning_words.phrase import match_meaning_phrase
from meaning_words.report import format_report
from meaning_words.run_logger import RunLogger
from meaning_words.url import extract_hostname, extract_query, shorten_url

__all__ = [
    # Models
    "ALL_ENGINES",
    "MAX_EXAMPLES",
    "AggregateResult",
    "EngineId",
    "HistoryRecord",
    "ScanOptions",
    "ScanStats",
    # Functions
    "classify",
    "extract_hostname",
    "extract_query",
    "match_meaning_phrase",
    "shorten_url",
    # Protocols
    "HistorySource",
    "HistoryStore",
    # History
    "ChromiumHistoryStore",
    "InMemoryHistoryStore",
    "JsonHistoryStore",
    "WindowedHistorySource",
    # Aggregation
    "QueryAggregator",
    # Export
    "format_report",
    "load_json",
    "rank",
    "to_csv",
    "to_json",
    "write_csv",
    "write_json",
    # Logging
    "RunLogger",
    # Config
    "MeaningWordsConfig",
    "create_from_config",
    "load_config",
]
