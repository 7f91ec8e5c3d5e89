"""Orchestrator for dictionary migrations.

One run deduplicates the store, clears existing day index assignments, then
updates or inserts each unique source entry, all inside a single unit of work.
Either every stage commits or nothing does. Words missing from the source are
kept in the word bank with no day index.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from logging import Logger, getLogger
from typing import TYPE_CHECKING

from .deduplicate import deduplicate_entries, deduplicate_store
from .errors import CommitFailure, MigrationError, RollbackFailure
from .reconcile import DEFAULT_PROGRESS_INTERVAL, reconcile_entries
from .reset import assigned_word_ids, reset_assignments
from .state import MigrationState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kupu.domain.model import SourceEntry
    from kupu.domain.ports import WordUnitOfWork

type UnitOfWorkFactory = Callable[[], WordUnitOfWork]
type Clock = Callable[[], datetime]


log = getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class MigrationResult:
    """Outcome of a committed migration run."""

    updated: int
    inserted: int
    preserved: int
    duplicates_removed: int = 0
    duplicates_skipped: int = 0

    @property
    def total_words(self) -> int:
        return self.updated + self.inserted + self.preserved


class MigrationEngine:
    """Reconcile a dictionary against the word store.

    The engine owns the unit of work for the whole run. It can be invoked again
    after success or failure; each call to :meth:`reconcile` restarts the state
    machine from ``NOT_STARTED``.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        *,
        clock: Clock = utcnow,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        logger: Logger | None = None,
    ) -> None:
        self._unit_of_work_factory = unit_of_work_factory
        self._clock = clock
        self._progress_interval = progress_interval
        self._log = logger or log
        self.state = MigrationState.NOT_STARTED
        self.history: list[MigrationState] = [self.state]

    def reconcile(self, entries: Sequence[SourceEntry]) -> MigrationResult:
        """Run one migration over ``entries``.

        Raises a :class:`MigrationError` subclass after rolling back when any
        stage fails. Unexpected exceptions are rolled back and re-raised as-is.
        """

        entries = list(entries)
        self.state = MigrationState.NOT_STARTED
        self.history = [self.state]
        self._log.info("Starting migration: word_count=%s", len(entries))

        with self._unit_of_work_factory() as uow:
            self._advance(MigrationState.TRANSACTION_OPEN)
            try:
                result = self._run_stages(uow, entries)
                self._advance(MigrationState.COMMITTING)
                self._commit(uow, result)
            except MigrationError as failure:
                self._roll_back(uow, failure)
                raise
            except Exception:
                self._log.exception("Migration aborted during %s, rolling back", self.state)
                try:
                    uow.rollback()
                finally:
                    self._advance(MigrationState.ROLLED_BACK)
                raise
            self._advance(MigrationState.COMMITTED)

        self._log.info(
            "Migration completed: duplicates_removed=%s, duplicates_skipped=%s, "
            "updated=%s, inserted=%s, preserved=%s, total_words=%s",
            result.duplicates_removed,
            result.duplicates_skipped,
            result.updated,
            result.inserted,
            result.preserved,
            result.total_words,
        )
        return result

    def _run_stages(self, uow: WordUnitOfWork, entries: list[SourceEntry]) -> MigrationResult:
        repository = uow.repositories.words
        now = self._clock()

        self._advance(MigrationState.DEDUPLICATING)
        removed = deduplicate_store(repository)
        if removed:
            self._log.info("Removed duplicate words from store: duplicates_removed=%s", removed)

        self._advance(MigrationState.RESETTING)
        previously_assigned = assigned_word_ids(repository)
        self._log.info("Existing day_index assignments: count=%s", len(previously_assigned))
        if previously_assigned:
            cleared = reset_assignments(repository, now=now)
            self._log.info("Unset existing day_index assignments: count=%s", cleared)

        self._advance(MigrationState.RECONCILING)
        unique = deduplicate_entries(entries, logger=self._log)
        if unique.skipped:
            self._log.info(
                "Skipped duplicate dictionary entries: duplicates_skipped=%s", unique.skipped
            )
        self._log.info("Processing words: word_count=%s", len(unique.entries))
        reconciliation = reconcile_entries(
            repository,
            unique.entries,
            now=now,
            progress_interval=self._progress_interval,
            logger=self._log,
        )

        return MigrationResult(
            updated=reconciliation.updated,
            inserted=reconciliation.inserted,
            preserved=len(previously_assigned - reconciliation.updated_ids),
            duplicates_removed=removed,
            duplicates_skipped=unique.skipped,
        )

    def _commit(self, uow: WordUnitOfWork, result: MigrationResult) -> None:
        try:
            uow.commit()
        except Exception as exc:
            raise CommitFailure(
                context={"updated": result.updated, "inserted": result.inserted}
            ) from exc

    def _roll_back(self, uow: WordUnitOfWork, failure: MigrationError) -> None:
        self._log.error(
            "Migration failed during %s, rolling back: %s",
            failure.stage,
            failure,
            exc_info=failure,
        )
        try:
            uow.rollback()
        except Exception as exc:
            self._advance(MigrationState.ROLLED_BACK)
            rollback_failure = RollbackFailure(failure)
            self._log.exception("Migration rollback failed: %s", rollback_failure)
            raise rollback_failure from exc
        self._advance(MigrationState.ROLLED_BACK)

    def _advance(self, state: MigrationState) -> None:
        self._log.debug("Migration state: %s -> %s", self.state, state)
        self.state = state
        self.history.append(state)
