"""Reconciling migration of a dictionary into the word store.

Stages, in the order the engine runs them:
1) remove stored duplicates (lowest id per word survives)
2) clear existing day index assignments
3) drop duplicate source entries (first occurrence survives)
4) update or insert each remaining entry by exact word text

:func:`validate_store` checks the result afterwards.
"""

from __future__ import annotations

from .deduplicate import EntryDeduplication, deduplicate_entries, deduplicate_store
from .engine import MigrationEngine, MigrationResult, UnitOfWorkFactory
from .errors import (
    CommitFailure,
    DeduplicationFailure,
    InsertFailure,
    LookupFailure,
    MigrationError,
    ResetFailure,
    RollbackFailure,
    UpdateFailure,
    ValidationFailure,
)
from .preview import MigrationPreview, preview_entries
from .reconcile import ReconciliationResult, reconcile_entries
from .reset import assigned_word_ids, reset_assignments
from .state import MigrationState
from .validate import REQUIRED_WORD_COUNT, StoreValidation, validate_store

__all__ = [
    "CommitFailure",
    "DeduplicationFailure",
    "EntryDeduplication",
    "InsertFailure",
    "LookupFailure",
    "MigrationEngine",
    "MigrationError",
    "MigrationPreview",
    "MigrationResult",
    "MigrationState",
    "REQUIRED_WORD_COUNT",
    "ReconciliationResult",
    "ResetFailure",
    "RollbackFailure",
    "StoreValidation",
    "UnitOfWorkFactory",
    "UpdateFailure",
    "ValidationFailure",
    "assigned_word_ids",
    "deduplicate_entries",
    "deduplicate_store",
    "preview_entries",
    "reconcile_entries",
    "reset_assignments",
    "validate_store",
]
