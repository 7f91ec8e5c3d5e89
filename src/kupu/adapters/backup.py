"""Timestamped copies of the SQLite database file."""

from __future__ import annotations

import shutil
from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path

BACKUP_TIMESTAMP_FORMAT: Final[str] = "%Y%m%d-%H%M%S"

log = getLogger(__name__)


class BackupError(RuntimeError):
    """Raised when a backup copy cannot be written."""


def backup_path_for(path: Path, *, now: datetime) -> Path:
    """``words.db`` -> ``words.db.backup.20260127-150405``."""
    return path.with_name(f"{path.name}.backup.{now.strftime(BACKUP_TIMESTAMP_FORMAT)}")


def backup_file(path: Path, *, now: datetime | None = None) -> Path | None:
    """Copy ``path`` next to itself; return ``None`` when there is nothing to back up."""

    if not path.exists():
        log.debug("Source file does not exist, skipping backup: file_path=%s", path)
        return None

    target = backup_path_for(path, now=now or datetime.now(UTC))
    log.info("Creating backup: file_path=%s, backup_path=%s", path, target)
    try:
        shutil.copy2(path, target)
    except OSError as exc:
        target.unlink(missing_ok=True)
        raise BackupError(f"Failed to back up {path} to {target}") from exc
    return target


def cleanup_old_backups(path: Path, *, keep_days: int, now: datetime | None = None) -> int:
    """Delete backups of ``path`` last modified more than ``keep_days`` ago.

    Files that cannot be inspected or removed are logged and skipped.
    """

    cutoff = (now or datetime.now(UTC)) - timedelta(days=keep_days)
    removed = 0
    for candidate in sorted(path.parent.glob(f"{path.name}.backup.*")):
        try:
            modified = datetime.fromtimestamp(candidate.stat().st_mtime, tz=UTC)
        except OSError:
            log.warning("Cannot stat backup file, skipping: file=%s", candidate)
            continue
        if modified >= cutoff:
            continue
        try:
            candidate.unlink()
        except OSError:
            log.exception("Failed to remove old backup: file=%s", candidate)
            continue
        log.debug("Removed old backup: file=%s", candidate)
        removed += 1

    log.info("Backup cleanup completed: deleted_count=%s", removed)
    return removed
