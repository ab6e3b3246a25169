"""Pydantic configuration models for meaning-words components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from meaning_words.data import ALL_ENGINES, EngineId, ScanOptions

# ============================================================
# History Configs
# ============================================================


class JsonHistoryConfig(BaseModel):
    """Configuration for a JSON history dump."""

    type: Literal["json"] = "json"
    path: str

    model_config = {"frozen": True}


class ChromiumHistoryConfig(BaseModel):
    """Configuration for a Chromium ``History`` SQLite file."""

    type: Literal["chromium"] = "chromium"
    path: str

    model_config = {"frozen": True}


HistoryConfig = Annotated[
    JsonHistoryConfig | ChromiumHistoryConfig,
    Field(discriminator="type"),
]


# ============================================================
# Scan Config
# ============================================================


class ScanConfig(BaseModel):
    """Configuration for the history scan."""

    engines: list[EngineId] = Field(default_factory=lambda: sorted(ALL_ENGINES))
    processing_limit: int | None = Field(default=None, ge=0)
    chunk_days: int = Field(default=30, gt=0)
    max_results_per_chunk: int = Field(default=10000, gt=0)

    model_config = {"frozen": True}

    @field_validator("engines")
    @classmethod
    def engines_must_be_known(cls, v: list[EngineId]) -> list[EngineId]:
        if EngineId.OTHER in v:
            raise ValueError("'other' is not a search engine")
        if not v:
            raise ValueError("At least one engine is required")
        return v

    def to_options(self) -> ScanOptions:
        return ScanOptions(
            engines=frozenset(self.engines),
            processing_limit=self.processing_limit,
        )


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-scan JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class MeaningWordsConfig(BaseModel):
    """Root configuration for meaning-words."""

    history: HistoryConfig | None = None
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
