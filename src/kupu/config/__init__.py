"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .migration import MigrationConfig, get_migration_config
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_storage_config,
    sqlite_uri,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MigrationConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_migration_config",
    "get_storage_config",
    "sqlite_uri",
]
