"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_DATA_DIR: Final[Path] = Path("data")
DEFAULT_DB_FILENAME: Final[str] = "words.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def database_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.database_filename

    def database_uri(self) -> str:
        return sqlite_uri(self.database_path())


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    # Set when the URI points at a SQLite file that can be backed up.
    path: Path | None = None


def sqlite_uri(path: Path) -> str:
    return f"sqlite+pysqlite:///{path}"


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("KUPU_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else DEFAULT_DATA_DIR
    return StorageConfig(data_dir=data_dir)


def get_database_config(
    *,
    storage: StorageConfig | None = None,
    database_path: Path | None = None,
) -> DatabaseConfig:
    """Resolve the database location.

    An explicit ``database_path`` wins over ``DATABASE_URI``, which wins over the
    storage directory default.
    """

    if database_path is not None:
        path = database_path.expanduser().resolve()
        return DatabaseConfig(uri=sqlite_uri(path), path=path)
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    path = storage_config.database_path()
    return DatabaseConfig(uri=sqlite_uri(path), path=path)
