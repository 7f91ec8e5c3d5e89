"""Defaults for dictionary migrations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_PROGRESS_INTERVAL = 50
DEFAULT_BACKUP_KEEP_DAYS = 7
DEFAULT_MAX_INPUT_BYTES = 100 * 1024 * 1024
DEFAULT_INPUT_PATH = Path("dictionary.json")


@dataclass(frozen=True, slots=True)
class MigrationConfig:
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    backup_keep_days: int = DEFAULT_BACKUP_KEEP_DAYS
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES
    default_input_path: Path = DEFAULT_INPUT_PATH


def get_migration_config() -> MigrationConfig:
    keep_days = os.getenv("KUPU_BACKUP_KEEP_DAYS")
    if keep_days is None or not keep_days.strip():
        return MigrationConfig()
    try:
        parsed = int(keep_days)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid KUPU_BACKUP_KEEP_DAYS: {keep_days!r}") from exc
    if parsed < 0:
        raise ConfigurationError("KUPU_BACKUP_KEEP_DAYS must be non-negative")
    return MigrationConfig(backup_keep_days=parsed)
