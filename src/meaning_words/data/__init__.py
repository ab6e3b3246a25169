"""Data models for meaning-words."""

from meaning_words.data.models import (
    ALL_ENGINES,
    MAX_EXAMPLES,
    AggregateResult,
    EngineId,
    HistoryRecord,
    ScanOptions,
    ScanStats,
)

__all__ = [
    "ALL_ENGINES",
    "MAX_EXAMPLES",
    "AggregateResult",
    "EngineId",
    "HistoryRecord",
    "ScanOptions",
    "ScanStats",
]
