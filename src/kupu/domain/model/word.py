"""Dictionary words and the source entries they are reconciled against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import datetime

DAY_INDEX_MIN: Final[int] = 1
DAY_INDEX_MAX: Final[int] = 366


@dataclass(eq=False, kw_only=True)
class Word:
    """A persisted word.

    ``day_index`` is the slot the word occupies in the yearly rotation. ``None``
    means the word sits in the word bank: kept, but not currently scheduled.
    The ``id`` is assigned by the store on first insert and never changes.
    """

    word: str
    meaning: str
    link: str | None = None
    photo: str | None = None
    photo_attribution: str | None = None
    day_index: int | None = None
    is_active: bool = True

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_assigned(self) -> bool:
        return self.day_index is not None

    def assign_day_index(self, day_index: int | None, *, now: datetime) -> None:
        """Move the word to ``day_index`` (or back to the word bank)."""
        self.day_index = day_index
        self.updated_at = now


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceEntry:
    """One row of an incoming dictionary, already parsed."""

    day_index: int
    word: str
    meaning: str
    link: str | None = None
    photo: str | None = None
    photo_attribution: str | None = None

    def to_word(self, *, now: datetime) -> Word:
        return Word(
            word=self.word,
            meaning=self.meaning,
            link=self.link,
            photo=self.photo,
            photo_attribution=self.photo_attribution,
            day_index=self.day_index,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
