"""JSON and CSV export of scan results."""

import csv
import io
import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, PositiveInt

from meaning_words.data import AggregateResult

logger = logging.getLogger(__name__)

DEFAULT_JSON_FILENAME = "meaning_words.json"
DEFAULT_CSV_FILENAME = "meaning_words.csv"
CSV_HEADER = ("word", "count")


class ExportDocument(BaseModel):
    """Validated shape of a JSON export."""

    emw_counts: dict[str, PositiveInt] = Field(default_factory=dict)
    emw_examples: dict[str, list[str]] = Field(default_factory=dict)

    def to_result(self) -> AggregateResult:
        examples = {p: urls for p, urls in self.emw_examples.items() if p in self.emw_counts}
        return AggregateResult.from_dicts(self.emw_counts, examples)


def rank(result: AggregateResult) -> list[tuple[str, int]]:
    """Sort phrases by count descending, then phrase ascending."""
    return sorted(result.counts.items(), key=lambda item: (-item[1], item[0]))


def to_json(result: AggregateResult, *, indent: int | None = 2) -> str:
    """Serialize a result as ``{"emw_counts": ..., "emw_examples": ...}``."""
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def to_csv(result: AggregateResult) -> str:
    """Serialize counts as CSV with a ``word,count`` header, ordered by phrase.

    Fields containing a comma, quote, CR or LF are quoted with embedded
    quotes doubled. Rows end with ``\\n``.
    """
    rows = [_csv_row(CSV_HEADER)]
    rows.extend(_csv_row((phrase, result.counts[phrase])) for phrase in sorted(result.counts))
    return "\n".join(rows) + "\n"


def _csv_row(fields: tuple[object, ...]) -> str:
    buffer = io.StringIO()
    # The writer quotes fields holding any lineterminator character, so "\r\n"
    # covers both CR and LF.
    csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n").writerow(fields)
    return buffer.getvalue().removesuffix("\r\n")


def write_json(result: AggregateResult, path: Path | str) -> Path:
    """Write a JSON export, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(result), encoding="utf-8")
    logger.info(f"Wrote {len(result)} phrases to {path}")
    return path


def write_csv(result: AggregateResult, path: Path | str) -> Path:
    """Write a CSV export, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the "\n" terminators as written
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(to_csv(result))
    logger.info(f"Wrote {len(result)} phrases to {path}")
    return path


def load_json(path: Path | str) -> AggregateResult:
    """Load a result previously written by ``write_json``.

    Missing keys are treated as empty.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If the file is not a valid export.
    """
    path = Path(path)
    document = ExportDocument.model_validate_json(path.read_text(encoding="utf-8"))
    return document.to_result()
