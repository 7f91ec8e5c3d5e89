"""Ports for persisting dictionary words."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from kupu.domain.model import Word

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class Found:
    """Lookup hit: the stored word matching the natural key."""

    word: Word


@dataclass(frozen=True, slots=True)
class NotFound:
    """Lookup miss. A normal outcome, distinct from a store failure."""


type WordLookup = Found | NotFound


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class WordRepository(Repository[Word], Protocol):
    """Persistence contract for words.

    Every method runs inside the caller's unit of work. Lookups must see writes
    made earlier in the same unit of work.
    """

    def get(self, word_id: int) -> Word | None: ...

    def get_by_day_index(self, day_index: int) -> Word | None: ...

    def list_all(self) -> Sequence[Word]: ...

    def count(self) -> int: ...

    def count_assigned(self) -> int: ...

    def assigned_ids(self) -> frozenset[int]: ...

    def assigned_day_indexes(self) -> list[int]:
        """Every non-null day index held in the store, ascending, repeats kept."""
        ...

    def find_by_word(self, text: str) -> WordLookup: ...

    def deduplicate_by_word(self) -> int:
        """Delete all but the lowest-id word per text; return how many went."""
        ...

    def clear_day_indexes(self, *, now: datetime) -> int:
        """Unassign every word holding a day index in one statement."""
        ...

    def assign_day_index(self, word: Word, day_index: int, *, now: datetime) -> None: ...
