"""SQLAlchemy mapping metadata for the kupu domain model."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import cache

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Dialect,
    Index,
    Integer,
    String,
    Table,
    TypeDecorator,
    orm,
    true,
)

from kupu.domain.model import DAY_INDEX_MAX, DAY_INDEX_MIN, Word

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


def _utcnow() -> datetime:
    return datetime.now(UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# The word text is intentionally not unique: stored duplicates are removed by
# the migration itself, not rejected on insert.
words_table = Table(
    "words",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("day_index", Integer, nullable=True, unique=True),
    Column("word", String, nullable=False),
    Column("meaning", String, nullable=False),
    Column("link", String, nullable=True),
    Column("photo", String, nullable=True),
    Column("photo_attribution", String, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False, default=_utcnow),
    Column("updated_at", UTCDateTime(), nullable=False, default=_utcnow),
    Column("is_active", Boolean, nullable=False, default=True, server_default=true()),
    CheckConstraint(
        f"day_index IS NULL OR (day_index >= {DAY_INDEX_MIN} AND day_index <= {DAY_INDEX_MAX})",
        name="day_index_range",
    ),
    Index("ix_words_word", "word"),
    Index("ix_words_is_active", "is_active"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Word, words_table)

    return mapper_registry
