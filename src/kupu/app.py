"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from kupu.adapters.backup import backup_file, cleanup_old_backups
from kupu.adapters.dictionary import read_dictionary_file
from kupu.adapters.sqlalchemy.unit_of_work import SqlAlchemyWordUnitOfWork, startup
from kupu.config import get_database_config, get_migration_config
from kupu.domain.migration import (
    MigrationEngine,
    MigrationPreview,
    MigrationResult,
    StoreValidation,
    UnitOfWorkFactory,
    preview_entries,
    validate_store,
)

if TYPE_CHECKING:
    from pathlib import Path

    from kupu.config import DatabaseConfig, MigrationConfig


log = getLogger(__name__)


def preview_dictionary(
    input_path: Path,
    *,
    migration_config: MigrationConfig | None = None,
) -> MigrationPreview:
    """Analyse a dictionary file without touching the database."""

    config = migration_config or get_migration_config()
    entries = read_dictionary_file(input_path, max_bytes=config.max_input_bytes)
    return preview_entries(entries)


def migrate_dictionary(
    input_path: Path,
    *,
    database_path: Path | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    migration_config: MigrationConfig | None = None,
) -> MigrationResult:
    """Reconcile a dictionary file into the word store.

    Without an explicit ``unit_of_work_factory`` the SQLite database is backed up,
    the SQLAlchemy adapter is started against it and its schema upgraded.
    """

    config = migration_config or get_migration_config()
    entries = read_dictionary_file(input_path, max_bytes=config.max_input_bytes)

    effective_uow = unit_of_work_factory
    if effective_uow is None:
        database = get_database_config(database_path=database_path)
        if database.path is not None:
            _backup_database(database.path, keep_days=config.backup_keep_days)
        effective_uow = _start_database(database)

    engine = MigrationEngine(effective_uow, progress_interval=config.progress_interval)
    return engine.reconcile(entries)


def validate_database(
    *,
    database_path: Path | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> StoreValidation:
    """Check that every day of the year holds exactly one stored word."""

    effective_uow = unit_of_work_factory
    if effective_uow is None:
        effective_uow = _start_database(get_database_config(database_path=database_path))

    with effective_uow() as uow:
        return validate_store(uow.repositories.words)


def _start_database(database: DatabaseConfig) -> UnitOfWorkFactory:
    if database.path is not None:
        database.path.parent.mkdir(parents=True, exist_ok=True)
    log.info("Using database: uri=%s", database.uri)
    startup(database_uri=database.uri, force=True)
    return SqlAlchemyWordUnitOfWork


def _backup_database(path: Path, *, keep_days: int) -> None:
    backup = backup_file(path)
    if backup is None:
        return
    log.info("Backup created: backup_path=%s", backup)
    cleanup_old_backups(path, keep_days=keep_days)
