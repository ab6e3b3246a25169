"""In-memory history store."""

from collections.abc import Iterable

from meaning_words.data import HistoryRecord


class InMemoryHistoryStore:
    """History store backed by a list of records.

    Args:
        records: Records to serve. Order does not matter.
    """

    def __init__(self, records: Iterable[HistoryRecord]) -> None:
        self._records = sorted(records, key=lambda r: r.timestamp, reverse=True)

    def __len__(self) -> int:
        return len(self._records)

    def search(self, *, start_time: int, end_time: int, max_results: int) -> list[HistoryRecord]:
        matches = [r for r in self._records if start_time <= r.timestamp < end_time]
        return matches[:max_results]
