"""Configuration module for meaning-words."""

from meaning_words.config.factory import (
    create_from_config,
    create_history_source,
    create_history_store,
)
from meaning_words.config.loader import get_default_config_path, load_config
from meaning_words.config.models import (
    ChromiumHistoryConfig,
    HistoryConfig,
    JsonHistoryConfig,
    LoggingConfig,
    MeaningWordsConfig,
    ScanConfig,
)

__all__ = [
    "ChromiumHistoryConfig",
    "HistoryConfig",
    "JsonHistoryConfig",
    "LoggingConfig",
    "MeaningWordsConfig",
    "ScanConfig",
    "create_from_config",
    "create_history_source",
    "create_history_store",
    "get_default_config_path",
    "load_config",
]
