"""Lifecycle states of a migration run."""

from __future__ import annotations

from enum import StrEnum


class MigrationState(StrEnum):
    NOT_STARTED = "not_started"
    TRANSACTION_OPEN = "transaction_open"
    DEDUPLICATING = "deduplicating"
    RESETTING = "resetting"
    RECONCILING = "reconciling"
    COMMITTING = "committing"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"

    @property
    def is_terminal(self) -> bool:
        return self in {MigrationState.COMMITTED, MigrationState.ROLLED_BACK}
