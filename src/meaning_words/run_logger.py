"""Run logger for recording scan progress to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from meaning_words.data import ScanStats


class ChunkRecord(BaseModel):
    """Record of a single history chunk passed through the aggregator."""

    index: int
    records: int
    stats: dict[str, Any]
    timestamp: str = ""
    duration_seconds: float = 0.0


class ScanRecord(BaseModel):
    """Record of a complete scan."""

    run_id: str
    options: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    chunks: list[ChunkRecord] = []
    distinct_phrases: int = 0
    total_stats: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, enums, sets, lists, dicts, and primitives. For
    ScanStats, includes the computed skip total.
    """
    if obj is None:
        return None
    if isinstance(obj, ScanStats):
        return {**dataclasses.asdict(obj), "skipped": obj.skipped}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, set | frozenset):
        return sorted(_serialize(item) for item in obj)
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    return obj


class RunLogger:
    """Accumulates per-chunk records and writes a JSON log file per scan.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: ScanRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, options: Any) -> None:
        """Initialize a new scan record.

        Args:
            options: The scan options.
        """
        if not self._enabled:
            return

        self._record = ScanRecord(
            run_id=str(uuid.uuid4()),
            options=_serialize(options),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_chunk(
        self,
        index: int,
        records: int,
        stats: ScanStats,
        duration_seconds: float,
    ) -> None:
        """Append a chunk record to the current scan.

        Args:
            index: Zero-based position of the chunk in the scan.
            records: Number of records the chunk contained.
            stats: Stats accumulated while processing this chunk.
            duration_seconds: Wall-clock time spent on the chunk.
        """
        if not self._enabled or self._record is None:
            return

        self._record.chunks.append(
            ChunkRecord(
                index=index,
                records=records,
                stats=_serialize(stats),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(self, distinct_phrases: int, stats: ScanStats | None) -> Path | None:
        """Write the scan record to a JSON file.

        Args:
            distinct_phrases: Number of distinct phrases found.
            stats: Totals for the whole scan.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.distinct_phrases = distinct_phrases
        self._record.total_stats = _serialize(stats)

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # scan_2026-02-12T14-30-00.json (colons → dashes)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"scan_{ts}_{self._record.run_id[:8]}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
