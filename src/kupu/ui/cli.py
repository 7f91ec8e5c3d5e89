from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from kupu.app import migrate_dictionary, preview_dictionary, validate_database
from kupu.config import configure_logging, get_migration_config
from kupu.domain.migration import REQUIRED_WORD_COUNT

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from kupu.domain.migration import MigrationPreview, StoreValidation

log = logging.getLogger(__name__)

MAX_LISTED_MISSING = 20


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the kupu word store")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    migrate = subparsers.add_parser("migrate", help="Import a dictionary into the word store")
    migrate.add_argument(
        "--input",
        type=str,
        default=str(get_migration_config().default_input_path),
        help="Path to the input dictionary JSON file (default: %(default)s)",
    )
    migrate.add_argument(
        "--db",
        type=str,
        help="Path to the SQLite database file (defaults to config)",
    )
    migrate.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview the migration without modifying the database",
    )

    validate = subparsers.add_parser(
        "validate", help="Check that every day of the year holds exactly one word"
    )
    validate.add_argument(
        "--db",
        type=str,
        help="Path to the SQLite database file (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def _parse_input_path(value: str) -> Path:
    path = Path(value)
    if ".." in path.parts:
        raise ValueError(f"Path traversal not allowed: {value}")
    if not path.is_file():
        raise ValueError(f"Input file does not exist: {value}")
    return path


def _report_preview(preview: MigrationPreview) -> None:
    log.info("Migration preview: words_to_import=%s", preview.entry_count)
    for entry in preview.sample:
        log.info("  [%s] %s - %s", entry.day_index, entry.word, entry.meaning)
    if preview.duplicate_day_indexes:
        log.warning("Duplicate day indexes: %s", list(preview.duplicate_day_indexes))
    if preview.duplicate_words:
        log.warning("Duplicate words (first occurrence wins): %s", list(preview.duplicate_words))
    if preview.missing_day_indexes:
        missing = list(preview.missing_day_indexes)
        log.warning(
            "Missing day indexes: count=%s, first=%s",
            len(missing),
            missing[:MAX_LISTED_MISSING],
        )
    if preview.is_complete:
        log.info("All day indexes present and unique")
    log.info("Dry run complete. Run without --dry-run to apply changes.")


def _report_validation(validation: StoreValidation) -> None:
    if validation.is_valid:
        log.info("Validation passed: total_words=%s", validation.total_words)
        return
    log.error(
        "Validation failed: total_words=%s, assigned_words=%s (expected %s)",
        validation.total_words,
        validation.assigned_words,
        REQUIRED_WORD_COUNT,
    )
    if validation.missing_day_indexes:
        missing = list(validation.missing_day_indexes)
        log.error(
            "Missing day indexes: count=%s, first=%s",
            len(missing),
            missing[:MAX_LISTED_MISSING],
        )
    if validation.duplicate_day_indexes:
        log.error("Duplicate day indexes: %s", list(validation.duplicate_day_indexes))


def _run_migrate(args: argparse.Namespace) -> None:
    try:
        input_path = _parse_input_path(args.input)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    database_path = Path(args.db) if args.db else None

    try:
        if args.dry_run:
            _report_preview(preview_dictionary(input_path))
            return
        result = migrate_dictionary(input_path, database_path=database_path)
        log.info(
            "Migration finished: updated=%s, inserted=%s, preserved=%s, total_words=%s",
            result.updated,
            result.inserted,
            result.preserved,
            result.total_words,
        )
    except Exception:
        log.exception("Migration failed")
        sys.exit(1)


def _run_validate(args: argparse.Namespace) -> None:
    database_path = Path(args.db) if args.db else None
    try:
        validation = validate_database(database_path=database_path)
    except Exception:
        log.exception("Validation failed")
        sys.exit(1)
    _report_validation(validation)
    if not validation.is_valid:
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=_log_level(parsed_args), force=True)
    if parsed_args.command == "validate":
        _run_validate(parsed_args)
    else:
        _run_migrate(parsed_args)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
