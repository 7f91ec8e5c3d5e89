"""Clearing existing day index assignments ahead of reconciliation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ResetFailure

if TYPE_CHECKING:
    from datetime import datetime

    from kupu.domain.ports import WordRepository


def assigned_word_ids(repository: WordRepository) -> frozenset[int]:
    """Ids of the words currently holding a day index."""

    try:
        return repository.assigned_ids()
    except Exception as exc:
        raise ResetFailure(
            "Failed to read existing day_index assignments",
            operation="read_assignments",
        ) from exc


def reset_assignments(repository: WordRepository, *, now: datetime) -> int:
    """Move every assigned word back to the word bank in one bulk update."""

    try:
        return repository.clear_day_indexes(now=now)
    except Exception as exc:
        raise ResetFailure() from exc
