"""Time-windowed walk backwards through a history store."""

import logging
import time
from collections.abc import Iterator

from meaning_words.data import HistoryRecord
from meaning_words.history.base import HistoryStore

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000


class WindowedHistorySource:
    """Supplies history as one chunk per fixed time window, newest window first.

    Windows step back from ``now`` by ``chunk_days`` until the epoch is
    reached. Each window is fetched only when the next chunk is requested,
    so a consumer that stops early triggers no further queries. Errors from
    the store propagate to the consumer.

    Args:
        store: History store to query.
        chunk_days: Width of each window in days.
        max_results_per_chunk: Maximum records fetched per window.
        now_ms: End of the newest window in epoch milliseconds (default: now).
    """

    def __init__(
        self,
        store: HistoryStore,
        *,
        chunk_days: int = 30,
        max_results_per_chunk: int = 10000,
        now_ms: int | None = None,
    ) -> None:
        if chunk_days <= 0:
            raise ValueError(f"chunk_days must be positive, got {chunk_days}")
        self._store = store
        self._chunk_ms = chunk_days * MS_PER_DAY
        self._max_results = max_results_per_chunk
        self._now_ms = now_ms

    def chunks(self) -> Iterator[list[HistoryRecord]]:
        """Yield the records of each window, walking back in time."""
        end_time = self._now_ms if self._now_ms is not None else int(time.time() * 1000)
        while end_time > 0:
            start_time = max(0, end_time - self._chunk_ms)
            records = self._store.search(
                start_time=start_time,
                end_time=end_time,
                max_results=self._max_results,
            )
            logger.debug(f"Fetched {len(records)} records for window [{start_time}, {end_time})")
            yield records
            end_time -= self._chunk_ms

    def __iter__(self) -> Iterator[list[HistoryRecord]]:
        return self.chunks()
