"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from sqlalchemy import delete, func, select, update

from kupu.adapters.sqlalchemy.mappings import words_table
from kupu.domain.model import Word
from kupu.domain.ports import Found, NotFound

if TYPE_CHECKING:
    from datetime import datetime

    from sqlalchemy.engine import CursorResult
    from sqlalchemy.orm import Session

    from kupu.domain.ports import WordLookup

log = logging.getLogger(__name__)


class SqlAlchemyWordRepository:
    """Word store on top of one session.

    Writes are flushed immediately so constraint violations surface on the
    operation that caused them rather than at commit.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Word) -> None:
        self.session.add(entity)
        self.session.flush()
        log.debug("Added word: id=%s, word=%r", entity.id, entity.word)

    def get(self, word_id: int) -> Word | None:
        return self.session.get(Word, word_id)

    def get_by_day_index(self, day_index: int) -> Word | None:
        stmt = select(Word).where(words_table.c.day_index == day_index)
        return self.session.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[Word]:
        stmt = select(Word).order_by(words_table.c.day_index, words_table.c.id)
        return list(self.session.scalars(stmt))

    def count(self) -> int:
        stmt = select(func.count()).select_from(words_table)
        return self.session.execute(stmt).scalar_one()

    def count_assigned(self) -> int:
        stmt = (
            select(func.count())
            .select_from(words_table)
            .where(words_table.c.day_index.is_not(None))
        )
        return self.session.execute(stmt).scalar_one()

    def assigned_ids(self) -> frozenset[int]:
        stmt = select(words_table.c.id).where(words_table.c.day_index.is_not(None))
        return frozenset(self.session.scalars(stmt))

    def assigned_day_indexes(self) -> list[int]:
        stmt = (
            select(words_table.c.day_index)
            .where(words_table.c.day_index.is_not(None))
            .order_by(words_table.c.day_index)
        )
        return list(self.session.scalars(stmt))

    def find_by_word(self, text: str) -> WordLookup:
        # Plain equality on TEXT: SQLite's default BINARY collation is case-sensitive.
        stmt = (
            select(Word)
            .where(words_table.c.word == text)
            .order_by(words_table.c.id)
            .limit(1)
        )
        existing = self.session.scalars(stmt).first()
        if existing is None:
            return NotFound()
        return Found(existing)

    def deduplicate_by_word(self) -> int:
        keepers = select(func.min(words_table.c.id)).group_by(words_table.c.word)
        stmt = select(words_table.c.id).where(words_table.c.id.not_in(keepers))
        duplicate_ids = list(self.session.scalars(stmt))
        if not duplicate_ids:
            return 0
        log.debug("Deleting duplicate words: ids=%s", duplicate_ids)
        self.session.execute(
            delete(Word)
            .where(words_table.c.id.in_(duplicate_ids))
            .execution_options(synchronize_session="fetch")
        )
        return len(duplicate_ids)

    def clear_day_indexes(self, *, now: datetime) -> int:
        stmt = (
            update(Word)
            .where(words_table.c.day_index.is_not(None))
            .values(day_index=None, updated_at=now)
            .execution_options(synchronize_session="evaluate")
        )
        result = cast("CursorResult[object]", self.session.execute(stmt))
        return result.rowcount

    def assign_day_index(self, word: Word, day_index: int, *, now: datetime) -> None:
        word.assign_day_index(day_index, now=now)
        self.session.flush()


if TYPE_CHECKING:
    from kupu.domain.ports import WordRepository

    _session_stub = cast("Session", object())
    _repo_check: WordRepository = SqlAlchemyWordRepository(_session_stub)
