"""CLI for scanning browsing history for "<phrase> meaning" searches."""

import argparse
import logging
import sqlite3
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from meaning_words.config import (
    MeaningWordsConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from meaning_words.data import AggregateResult
from meaning_words.export import (
    DEFAULT_CSV_FILENAME,
    DEFAULT_JSON_FILENAME,
    load_json,
    write_csv,
    write_json,
)
from meaning_words.report import format_report

logger = logging.getLogger(__name__)

ENGINE_CHOICES = ("all", "google", "bing", "ddg")


def _must_exist(v: Path | None) -> Path | None:
    if v is not None and not v.exists():
        raise ValueError(f"File not found: {v}")
    return v


class ScanArgs(BaseModel):
    """Validated arguments of the ``scan`` command."""

    config: Path | None = None
    history: Path | None = None
    chromium: bool = False
    engine: Literal["all", "google", "bing", "ddg"] | None = None
    limit: int | None = Field(default=None, ge=0)
    output: Path = Path(DEFAULT_JSON_FILENAME)
    log: bool = False
    log_dir: str | None = None

    @field_validator("config", "history")
    @classmethod
    def path_must_exist(cls, v: Path | None) -> Path | None:
        return _must_exist(v)


class ShowArgs(BaseModel):
    """Validated arguments of the ``show`` command."""

    results: Path
    examples: bool = True

    @field_validator("results")
    @classmethod
    def path_must_exist(cls, v: Path) -> Path:
        return _must_exist(v)


class ExportArgs(BaseModel):
    """Validated arguments of the ``export`` command."""

    results: Path
    format: Literal["json", "csv"] = "csv"
    output: Path | None = None

    @field_validator("results")
    @classmethod
    def path_must_exist(cls, v: Path) -> Path:
        return _must_exist(v)

    @property
    def output_path(self) -> Path:
        if self.output is not None:
            return self.output
        return Path(DEFAULT_CSV_FILENAME if self.format == "csv" else DEFAULT_JSON_FILENAME)


class ClearArgs(BaseModel):
    """Validated arguments of the ``clear`` command."""

    results: Path
    yes: bool = False

    @field_validator("results")
    @classmethod
    def path_must_exist(cls, v: Path) -> Path:
        return _must_exist(v)


def build_config(args: ScanArgs) -> MeaningWordsConfig:
    """Load the config file and apply command-line overrides.

    Args:
        args: Validated scan arguments.

    Returns:
        Validated config with overrides applied.
    """
    config_path = args.config
    if config_path is None and get_default_config_path().exists():
        config_path = get_default_config_path()
    config = load_config(config_path) if config_path else MeaningWordsConfig()

    raw: dict[str, Any] = config.model_dump(mode="json")
    if args.history is not None:
        raw["history"] = {
            "type": "chromium" if args.chromium else "json",
            "path": str(args.history),
        }
    if args.engine is not None:
        raw["scan"]["engines"] = (
            ["google", "bing", "ddg"] if args.engine == "all" else [args.engine]
        )
    if args.limit is not None:
        raw["scan"]["processing_limit"] = args.limit
    return MeaningWordsConfig.model_validate(raw)


def run_scan(args: ScanArgs) -> AggregateResult:
    """Scan the configured history, write the JSON export and print the report.

    Args:
        args: Validated scan arguments.

    Returns:
        The scan result.
    """
    config = build_config(args)
    aggregator, source, options, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir,
    )

    engines = ", ".join(sorted(options.engines))
    logger.info(f"Scanning {config.history.path} for {engines} searches")

    result = aggregator.scan(source.chunks(), options)
    write_json(result, args.output)

    print(format_report(result))

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nScan log written to: {run_logger.last_log_path}")
    return result


def run_show(args: ShowArgs) -> AggregateResult:
    """Print the report for a stored JSON export."""
    result = load_json(args.results)
    print(format_report(result, show_examples=args.examples))
    return result


def run_export(args: ExportArgs) -> Path:
    """Convert a stored JSON export to the requested format."""
    result = load_json(args.results)
    if args.format == "csv":
        return write_csv(result, args.output_path)
    return write_json(result, args.output_path)


def run_clear(args: ClearArgs) -> bool:
    """Delete a stored JSON export after confirmation.

    The file is validated as an export first, so only results files are
    removed.

    Returns:
        True if the file was deleted, False if the user cancelled.
    """
    result = load_json(args.results)
    if not args.yes:
        answer = input(f"Delete {len(result)} stored words in {args.results}? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled.")
            return False
    args.results.unlink()
    logger.info(f"Cleared {args.results}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Find the words you looked up with "<word> meaning" searches.'
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan browsing history")
    scan.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    scan.add_argument(
        "--history",
        type=Path,
        default=None,
        help="History file to scan (JSON list of {url, timestamp} by default)",
    )
    scan.add_argument(
        "--chromium",
        action="store_true",
        default=False,
        help="Treat --history as a Chromium 'History' SQLite file",
    )
    scan.add_argument(
        "--engine",
        choices=ENGINE_CHOICES,
        default=None,
        help="Search engine to count (default: from config, all engines)",
    )
    scan.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of history records to process",
    )
    scan.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(DEFAULT_JSON_FILENAME),
        help=f"Where to write the JSON results (default: {DEFAULT_JSON_FILENAME})",
    )
    scan.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-scan JSON logging",
    )
    scan.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for scan log files (default: from config, logs/)",
    )

    show = subparsers.add_parser("show", help="Show stored results")
    show.add_argument("results", type=Path, help="JSON results file")
    show.add_argument(
        "--no-examples",
        dest="examples",
        action="store_false",
        default=True,
        help="Hide example URLs",
    )

    export = subparsers.add_parser("export", help="Convert stored results")
    export.add_argument("results", type=Path, help="JSON results file")
    export.add_argument("--format", "-f", choices=("json", "csv"), default="csv")
    export.add_argument("--output", "-o", type=Path, default=None)

    clear = subparsers.add_parser("clear", help="Delete stored results")
    clear.add_argument("results", type=Path, help="JSON results file")
    clear.add_argument(
        "--yes", "-y", action="store_true", default=False, help="Skip the confirmation prompt"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args(argv)
    options = {k: v for k, v in vars(ns).items() if k != "command"}

    try:
        if ns.command == "scan":
            run_scan(ScanArgs(**options))
        elif ns.command == "show":
            run_show(ShowArgs(**options))
        elif ns.command == "clear":
            run_clear(ClearArgs(**options))
        else:
            path = run_export(ExportArgs(**options))
            print(f"Wrote {path}")
    except (ValidationError, ValueError, FileNotFoundError, sqlite3.Error) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
