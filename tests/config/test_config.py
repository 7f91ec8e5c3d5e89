from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kupu.config import (
    ConfigurationError,
    MigrationConfig,
    StorageConfig,
    get_database_config,
    get_migration_config,
    get_storage_config,
    sqlite_uri,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_storage_config_uses_env_override(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("KUPU_DATA_DIR", str(tmp_path / "custom"))

    config = get_storage_config()

    assert config.data_dir == tmp_path / "custom"
    assert config.database_path() == (tmp_path / "custom" / "words.db").resolve()
    assert (tmp_path / "custom").is_dir()


def test_storage_config_database_path_without_creating(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path / "lazy")

    path = config.database_path(ensure=False)

    assert path.name == "words.db"
    assert not (tmp_path / "lazy").exists()


def test_explicit_database_path_wins(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")
    target = tmp_path / "words.db"

    config = get_database_config(database_path=target)

    assert config.path == target.resolve()
    assert config.uri == sqlite_uri(target.resolve())


def test_database_uri_env_is_used_without_backup_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    config = get_database_config()

    assert config.uri == "sqlite+pysqlite:///:memory:"
    assert config.path is None


def test_storage_default_applies_without_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)

    config = get_database_config(storage=StorageConfig(data_dir=tmp_path))

    assert config.path == tmp_path.resolve() / "words.db"
    assert config.uri.startswith("sqlite+pysqlite:///")


def test_migration_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("KUPU_BACKUP_KEEP_DAYS", raising=False)

    assert get_migration_config() == MigrationConfig()
    assert MigrationConfig().backup_keep_days == 7


def test_migration_config_reads_keep_days(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KUPU_BACKUP_KEEP_DAYS", "30")

    assert get_migration_config().backup_keep_days == 30


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_migration_config_rejects_invalid_keep_days(
    monkeypatch: pytest.MonkeyPatch,
    value: str,
) -> None:
    monkeypatch.setenv("KUPU_BACKUP_KEEP_DAYS", value)

    with pytest.raises(ConfigurationError):
        get_migration_config()
