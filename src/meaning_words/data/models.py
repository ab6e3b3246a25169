"""Core data models for meaning-words."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

MAX_EXAMPLES = 3


class EngineId(StrEnum):
    """Search engine a history URL belongs to.

    ``OTHER`` is only ever produced by classification; it is never a valid
    engine to scan for.
    """

    GOOGLE = "google"
    BING = "bing"
    DDG = "ddg"
    OTHER = "other"


ALL_ENGINES: frozenset[EngineId] = frozenset({EngineId.GOOGLE, EngineId.BING, EngineId.DDG})


@dataclass(frozen=True)
class HistoryRecord:
    """A single visited URL from the browser history."""

    url: str
    timestamp: int = 0  # epoch milliseconds


@dataclass(frozen=True)
class ScanOptions:
    """Options for one history scan.

    Attributes:
        engines: Engines whose queries are counted.
        processing_limit: Maximum number of records to evaluate, or None
            to evaluate every supplied record.
    """

    engines: frozenset[EngineId] = ALL_ENGINES
    processing_limit: int | None = None


@dataclass(frozen=True)
class AggregateResult:
    """Read-only snapshot of phrase counts and example URLs from one scan."""

    counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    examples: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dicts(
        cls, counts: Mapping[str, int], examples: Mapping[str, list[str] | tuple[str, ...]]
    ) -> "AggregateResult":
        """Freeze plain dictionaries into a snapshot.

        Example lists are copied into tuples and capped at ``MAX_EXAMPLES``.
        """
        return cls(
            counts=MappingProxyType(dict(counts)),
            examples=MappingProxyType(
                {phrase: tuple(urls[:MAX_EXAMPLES]) for phrase, urls in examples.items()}
            ),
        )

    def __len__(self) -> int:
        return len(self.counts)

    def to_dict(self) -> dict[str, dict]:
        """Plain-dict form using the export key names."""
        return {
            "emw_counts": dict(self.counts),
            "emw_examples": {phrase: list(urls) for phrase, urls in self.examples.items()},
        }


@dataclass
class ScanStats:
    """Bookkeeping for a single scan."""

    chunks: int = 0
    processed: int = 0
    matched: int = 0
    skipped_unparsed: int = 0
    skipped_engine: int = 0
    skipped_no_match: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_unparsed + self.skipped_engine + self.skipped_no_match

    def __iadd__(self, other: "ScanStats") -> "ScanStats":
        self.chunks += other.chunks
        self.processed += other.processed
        self.matched += other.matched
        self.skipped_unparsed += other.skipped_unparsed
        self.skipped_engine += other.skipped_engine
        self.skipped_no_match += other.skipped_no_match
        return self
