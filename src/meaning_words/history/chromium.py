"""History store reading a Chromium ``History`` SQLite database."""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from meaning_words.data import HistoryRecord

logger = logging.getLogger(__name__)

# Chromium stores times as microseconds since 1601-01-01 UTC.
WEBKIT_EPOCH_OFFSET_US = 11_644_473_600_000_000

_SEARCH_SQL = """
SELECT url, last_visit_time
FROM urls
WHERE last_visit_time >= ? AND last_visit_time < ?
ORDER BY last_visit_time DESC
LIMIT ?
"""


def webkit_to_epoch_ms(webkit_us: int) -> int:
    """Convert a Chromium timestamp to epoch milliseconds."""
    return (webkit_us - WEBKIT_EPOCH_OFFSET_US) // 1000


def epoch_ms_to_webkit(epoch_ms: int) -> int:
    """Convert epoch milliseconds to a Chromium timestamp."""
    return epoch_ms * 1000 + WEBKIT_EPOCH_OFFSET_US


class ChromiumHistoryStore:
    """Read-only history store over a Chromium profile's ``History`` file.

    The browser keeps the file locked while running; point this at a copy
    if opening fails.

    Args:
        path: Path to the ``History`` SQLite file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser().resolve()
        if not self.path.exists():
            raise FileNotFoundError(f"History database not found: {self.path}")

    def search(self, *, start_time: int, end_time: int, max_results: int) -> list[HistoryRecord]:
        with closing(sqlite3.connect(f"{self.path.as_uri()}?mode=ro", uri=True)) as conn:
            rows = conn.execute(
                _SEARCH_SQL,
                (epoch_ms_to_webkit(start_time), epoch_ms_to_webkit(end_time), max_results),
            ).fetchall()

        logger.debug(f"Read {len(rows)} rows from {self.path}")
        return [
            HistoryRecord(url=url, timestamp=webkit_to_epoch_ms(visit_time))
            for url, visit_time in rows
        ]
