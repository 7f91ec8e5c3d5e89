"""Dry-run analysis of an incoming dictionary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kupu.domain.model import DAY_INDEX_MAX, DAY_INDEX_MIN

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kupu.domain.model import SourceEntry

DEFAULT_SAMPLE_SIZE = 5


@dataclass(slots=True, frozen=True)
class MigrationPreview:
    entry_count: int
    sample: tuple[SourceEntry, ...] = ()
    duplicate_day_indexes: tuple[int, ...] = ()
    missing_day_indexes: tuple[int, ...] = ()
    duplicate_words: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Every day of the year is covered exactly once."""
        return not self.duplicate_day_indexes and not self.missing_day_indexes


def preview_entries(
    entries: Sequence[SourceEntry],
    *,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> MigrationPreview:
    seen_days: set[int] = set()
    seen_words: set[str] = set()
    duplicate_days: list[int] = []
    duplicate_words: list[str] = []
    for entry in entries:
        if entry.day_index in seen_days:
            duplicate_days.append(entry.day_index)
        seen_days.add(entry.day_index)
        if entry.word in seen_words:
            duplicate_words.append(entry.word)
        seen_words.add(entry.word)

    missing = tuple(
        day for day in range(DAY_INDEX_MIN, DAY_INDEX_MAX + 1) if day not in seen_days
    )
    return MigrationPreview(
        entry_count=len(entries),
        sample=tuple(entries[:sample_size]),
        duplicate_day_indexes=tuple(duplicate_days),
        missing_day_indexes=missing,
        duplicate_words=tuple(duplicate_words),
    )
