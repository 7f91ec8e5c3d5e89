"""Public domain model surface."""

from __future__ import annotations

from kupu.domain.model.word import (
    DAY_INDEX_MAX,
    DAY_INDEX_MIN,
    SourceEntry,
    Word,
)

__all__ = [
    "DAY_INDEX_MAX",
    "DAY_INDEX_MIN",
    "SourceEntry",
    "Word",
]
