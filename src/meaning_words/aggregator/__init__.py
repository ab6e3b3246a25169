"""Query aggregation module."""

from meaning_words.aggregator.query import QueryAggregator

__all__ = [
    "QueryAggregator",
]
