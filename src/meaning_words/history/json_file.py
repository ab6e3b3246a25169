"""History store loaded from a JSON dump."""

import json
import logging
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter

from meaning_words.data import HistoryRecord
from meaning_words.history.memory import InMemoryHistoryStore

logger = logging.getLogger(__name__)


class HistoryEntry(BaseModel):
    """One entry of a JSON history dump.

    Accepts the ``lastVisitTime`` key used by browser history APIs as well
    as ``timestamp``.
    """

    url: str = ""
    timestamp: float = Field(
        default=0, validation_alias=AliasChoices("timestamp", "lastVisitTime", "ts")
    )

    model_config = {"frozen": True, "extra": "ignore"}

    def to_record(self) -> HistoryRecord:
        return HistoryRecord(url=self.url, timestamp=int(self.timestamp))


_entries_adapter = TypeAdapter(list[HistoryEntry])


def load_history_json(path: Path | str) -> list[HistoryRecord]:
    """Load history records from a JSON file holding a list of entries.

    Args:
        path: Path to the JSON file.

    Returns:
        Records in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If the file is not a list of entries.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)

    entries = _entries_adapter.validate_python(raw)
    logger.info(f"Loaded {len(entries)} history entries from {path}")
    return [entry.to_record() for entry in entries]


class JsonHistoryStore(InMemoryHistoryStore):
    """History store serving the contents of a JSON history dump.

    Args:
        path: Path to a JSON list of ``{url, timestamp}`` objects.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()
        super().__init__(load_history_json(self.path))
