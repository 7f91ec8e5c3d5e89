"""Update-or-insert of source entries by exact word text."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import TYPE_CHECKING

from kupu.domain.ports import Found, NotFound

from .errors import InsertFailure, LookupFailure, UpdateFailure

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from kupu.domain.model import SourceEntry, Word
    from kupu.domain.ports import WordLookup, WordRepository

DEFAULT_PROGRESS_INTERVAL = 50

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationResult:
    """Counters for one pass over the source entries."""

    updated: int = 0
    inserted: int = 0
    updated_ids: set[int] = field(default_factory=set[int])

    @property
    def processed(self) -> int:
        return self.updated + self.inserted


def reconcile_entries(
    repository: WordRepository,
    entries: Sequence[SourceEntry],
    *,
    now: datetime,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    logger: Logger | None = None,
) -> ReconciliationResult:
    """Apply ``entries`` to the store in order.

    Entries must already be unique by word. A word found in the store only gets
    its day index and ``updated_at`` changed; a missing word is inserted with
    the entry's payload.
    """

    logger = logger or log
    result = ReconciliationResult()
    total = len(entries)
    for position, entry in enumerate(entries, start=1):
        match _lookup(repository, entry):
            case Found(word=existing):
                _update(repository, existing, entry, now=now)
                result.updated += 1
                if existing.id is not None:
                    result.updated_ids.add(existing.id)
            case NotFound():
                _insert(repository, entry, now=now)
                result.inserted += 1

        if progress_interval > 0 and position % progress_interval == 0:
            logger.debug("Migration progress: processed=%s, total=%s", position, total)
    return result


def _lookup(repository: WordRepository, entry: SourceEntry) -> WordLookup:
    try:
        return repository.find_by_word(entry.word)
    except Exception as exc:
        raise LookupFailure(word=entry.word, day_index=entry.day_index) from exc


def _update(
    repository: WordRepository,
    existing: Word,
    entry: SourceEntry,
    *,
    now: datetime,
) -> None:
    try:
        repository.assign_day_index(existing, entry.day_index, now=now)
    except Exception as exc:
        raise UpdateFailure(word=entry.word, day_index=entry.day_index) from exc


def _insert(repository: WordRepository, entry: SourceEntry, *, now: datetime) -> None:
    try:
        repository.add(entry.to_word(now=now))
    except Exception as exc:
        raise InsertFailure(
            f"Failed to insert word {entry.word!r}",
            word=entry.word,
            day_index=entry.day_index,
        ) from exc
