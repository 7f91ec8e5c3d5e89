"""Duplicate resolution for both sides of a migration.

Store side: the lowest id per word text survives. Source side: the first entry
per word text in source order survives, whatever its day index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import TYPE_CHECKING

from .errors import DeduplicationFailure

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kupu.domain.model import SourceEntry
    from kupu.domain.ports import WordRepository


log = getLogger(__name__)


@dataclass(slots=True)
class EntryDeduplication:
    """Unique source entries in original order plus the number dropped."""

    entries: list[SourceEntry] = field(default_factory=list["SourceEntry"])
    skipped: int = 0


def deduplicate_store(repository: WordRepository) -> int:
    """Remove stored duplicates, keeping the earliest-created word per text."""

    try:
        return repository.deduplicate_by_word()
    except Exception as exc:
        raise DeduplicationFailure() from exc


def deduplicate_entries(
    entries: Iterable[SourceEntry],
    *,
    logger: Logger | None = None,
) -> EntryDeduplication:
    """Keep the first occurrence of each word text."""

    logger = logger or log
    result = EntryDeduplication()
    seen: set[str] = set()
    for entry in entries:
        if entry.word in seen:
            result.skipped += 1
            logger.debug(
                "Skipping duplicate dictionary entry: word=%r, day_index=%s",
                entry.word,
                entry.day_index,
            )
            continue
        seen.add(entry.word)
        result.entries.append(entry)
    return result
