"""History store and source protocols."""

from collections.abc import Iterator
from typing import Protocol

from meaning_words.data import HistoryRecord


class HistoryStore(Protocol):
    """Interface for a queryable browsing history."""

    def search(self, *, start_time: int, end_time: int, max_results: int) -> list[HistoryRecord]:
        """Return records visited within ``[start_time, end_time)``.

        Args:
            start_time: Window start in epoch milliseconds (inclusive).
            end_time: Window end in epoch milliseconds (exclusive).
            max_results: Maximum number of records to return.

        Returns:
            Records in the window, newest first.
        """
        ...


class HistorySource(Protocol):
    """Interface for anything that supplies history to the aggregator in chunks."""

    def chunks(self) -> Iterator[list[HistoryRecord]]:
        """Yield chunks of history records in scan order."""
        ...
