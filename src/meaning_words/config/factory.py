"""Factory functions to create components from configuration."""

from pathlib import Path

from meaning_words.aggregator.query import QueryAggregator
from meaning_words.config.models import (
    ChromiumHistoryConfig,
    HistoryConfig,
    JsonHistoryConfig,
    MeaningWordsConfig,
    ScanConfig,
)
from meaning_words.data import ScanOptions
from meaning_words.history.base import HistoryStore
from meaning_words.history.chromium import ChromiumHistoryStore
from meaning_words.history.json_file import JsonHistoryStore
from meaning_words.history.windowed import WindowedHistorySource
from meaning_words.run_logger import RunLogger


def create_history_store(config: HistoryConfig) -> HistoryStore:
    """Create a history store from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, JsonHistoryConfig):
        return JsonHistoryStore(config.path)
    if isinstance(config, ChromiumHistoryConfig):
        return ChromiumHistoryStore(config.path)
    msg = f"Unknown history config type: {type(config)}"
    raise ValueError(msg)


def create_history_source(
    history: HistoryConfig,
    scan: ScanConfig,
    *,
    now_ms: int | None = None,
) -> WindowedHistorySource:
    """Create a windowed history source over the configured store."""
    return WindowedHistorySource(
        create_history_store(history),
        chunk_days=scan.chunk_days,
        max_results_per_chunk=scan.max_results_per_chunk,
        now_ms=now_ms,
    )


def create_from_config(
    config: MeaningWordsConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    now_ms: int | None = None,
) -> tuple[QueryAggregator, WindowedHistorySource, ScanOptions, RunLogger | None]:
    """Create everything needed for a scan from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        now_ms: End of the newest history window (default: now).

    Returns:
        Tuple of (aggregator, history_source, options, run_logger).
        run_logger is None if logging is disabled.

    Raises:
        ValueError: If the config names no history store.
    """
    if config.history is None:
        raise ValueError("No history store configured")

    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    aggregator = QueryAggregator(run_logger=run_logger)
    source = create_history_source(config.history, config.scan, now_ms=now_ms)
    return (aggregator, source, config.scan.to_options(), run_logger)
