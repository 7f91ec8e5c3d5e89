"""SQLAlchemy adapter package for kupu."""

from __future__ import annotations

from .mappings import mapper_registry, start_mappers, words_table
from .repositories import SqlAlchemyWordRepository
from .unit_of_work import (
    SqlAlchemyWordUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyWordRepository",
    "SqlAlchemyWordUnitOfWork",
    "StartupError",
    "configured_engine",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
    "words_table",
]
