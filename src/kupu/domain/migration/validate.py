"""Post-migration check that every day of the year holds exactly one word."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from logging import Logger, getLogger
from typing import TYPE_CHECKING

from kupu.domain.model import DAY_INDEX_MAX, DAY_INDEX_MIN

from .errors import ValidationFailure

if TYPE_CHECKING:
    from kupu.domain.ports import WordRepository

REQUIRED_WORD_COUNT = DAY_INDEX_MAX - DAY_INDEX_MIN + 1

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StoreValidation:
    """Day index coverage of the word store.

    ``total_words`` counts the whole store, word bank included;
    ``assigned_words`` only the words holding a day index.
    """

    total_words: int
    assigned_words: int
    missing_day_indexes: tuple[int, ...] = ()
    duplicate_day_indexes: tuple[int, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_store(
    repository: WordRepository,
    *,
    logger: Logger | None = None,
) -> StoreValidation:
    logger = logger or log
    logger.info("Starting validation")

    try:
        total = repository.count()
        day_indexes = repository.assigned_day_indexes()
    except Exception as exc:
        raise ValidationFailure() from exc

    counts = Counter(day_indexes)
    missing = tuple(day for day in range(DAY_INDEX_MIN, DAY_INDEX_MAX + 1) if day not in counts)
    duplicates = tuple(sorted(day for day, seen in counts.items() if seen > 1))

    errors: list[str] = []
    if len(day_indexes) != REQUIRED_WORD_COUNT:
        errors.append(f"expected {REQUIRED_WORD_COUNT} assigned words, found {len(day_indexes)}")
    if missing:
        errors.append(f"{len(missing)} day indexes have no word")
    if duplicates:
        errors.append(f"{len(duplicates)} day indexes are held by more than one word")

    validation = StoreValidation(
        total_words=total,
        assigned_words=len(day_indexes),
        missing_day_indexes=missing,
        duplicate_day_indexes=duplicates,
        errors=tuple(errors),
    )
    if validation.is_valid:
        logger.info("Validation passed: total_words=%s", total)
    else:
        logger.warning(
            "Validation failed: assigned_words=%s, missing=%s, duplicates=%s",
            validation.assigned_words,
            len(missing),
            len(duplicates),
        )
    return validation
