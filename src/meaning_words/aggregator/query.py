"""Aggregation of "<phrase> meaning" queries over browsing history."""

import logging
import time
from collections.abc import Iterable, Sequence

from meaning_words.data import (
    MAX_EXAMPLES,
    AggregateResult,
    EngineId,
    HistoryRecord,
    ScanOptions,
    ScanStats,
)
from meaning_words.engine import classify
from meaning_words.phrase import match_meaning_phrase
from meaning_words.run_logger import RunLogger
from meaning_words.url import extract_hostname, extract_query

logger = logging.getLogger(__name__)


class QueryAggregator:
    """Counts "<phrase> meaning" searches found in chunks of history records.

    Flow per record:
    1. Extract the hostname and classify the search engine
    2. Skip engines that are unknown or not selected
    3. Extract the ``q`` parameter and match the "<phrase> meaning" shape
    4. Count the phrase and keep the first few URLs as examples

    A malformed record is skipped, never fatal. Chunks are consumed in the
    order given and no further chunk is requested once the processing limit
    is reached. Each call to ``scan`` starts from an empty aggregate.

    Args:
        run_logger: Optional RunLogger for per-chunk scan records.
    """

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        self._run_logger = run_logger

    def scan(
        self,
        history_chunks: Iterable[Sequence[HistoryRecord]],
        options: ScanOptions | None = None,
    ) -> AggregateResult:
        """Scan history chunks and aggregate matching queries.

        Args:
            history_chunks: Chunks of history records, possibly lazily
                produced. Errors raised while producing a chunk propagate.
            options: Engines to count and optional processing limit.

        Returns:
            Snapshot of phrase counts and example URLs.
        """
        options = options or ScanOptions()
        limit = options.processing_limit
        counts: dict[str, int] = {}
        examples: dict[str, list[str]] = {}
        stats = ScanStats()
        processed = 0

        if self._run_logger:
            self._run_logger.start_run(options)

        if limit is None or limit > 0:
            for index, chunk in enumerate(history_chunks):
                t0 = time.monotonic()
                chunk_stats = ScanStats(chunks=1)

                for record in chunk:
                    processed += 1
                    if limit is not None and processed > limit:
                        break
                    chunk_stats.processed += 1

                    candidate = self._evaluate(record, options.engines, chunk_stats)
                    if candidate is None:
                        continue

                    chunk_stats.matched += 1
                    counts[candidate] = counts.get(candidate, 0) + 1
                    urls = examples.setdefault(candidate, [])
                    if len(urls) < MAX_EXAMPLES:
                        urls.append(record.url)

                stats += chunk_stats
                logger.debug(
                    f"Chunk {index}: {chunk_stats.processed} records evaluated, "
                    f"{chunk_stats.matched} matched"
                )
                if self._run_logger:
                    self._run_logger.log_chunk(
                        index=index,
                        records=len(chunk),
                        stats=chunk_stats,
                        duration_seconds=time.monotonic() - t0,
                    )

                if limit is not None and processed >= limit:
                    logger.info(f"Processing limit of {limit} records reached")
                    break

        result = AggregateResult.from_dicts(counts, examples)
        logger.info(
            f"Scanned {stats.processed} records in {stats.chunks} chunks: "
            f"{stats.matched} matches, {len(result)} distinct phrases"
        )
        if self._run_logger:
            self._run_logger.finish_run(len(result), stats)
        return result

    @staticmethod
    def _evaluate(
        record: HistoryRecord, engines: frozenset[EngineId], stats: ScanStats
    ) -> str | None:
        """Return the phrase key for a record, or None if it should be skipped."""
        hostname = extract_hostname(record.url) if record.url else None
        if hostname is None:
            stats.skipped_unparsed += 1
            return None

        engine = classify(hostname)
        if engine is EngineId.OTHER or engine not in engines:
            stats.skipped_engine += 1
            return None

        candidate = match_meaning_phrase(extract_query(record.url))
        if candidate is None:
            stats.skipped_no_match += 1
        return candidate
