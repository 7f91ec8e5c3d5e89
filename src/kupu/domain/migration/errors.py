"""Failures raised by a migration run.

Every failure names the operation that broke and, where one was in flight, the
word and day index being processed. The store-level exception is chained as
``__cause__``. Lookup misses are not failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .state import MigrationState

if TYPE_CHECKING:
    from collections.abc import Mapping


class MigrationError(RuntimeError):
    """Base class for migration failures."""

    default_stage: ClassVar[MigrationState] = MigrationState.NOT_STARTED
    default_operation: ClassVar[str] = "migrate"
    default_message: ClassVar[str] = "Migration failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        stage: MigrationState | None = None,
        operation: str | None = None,
        word: str | None = None,
        day_index: int | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.stage = stage or self.default_stage
        self.operation = operation or self.default_operation
        self.word = word
        self.day_index = day_index
        self.context: dict[str, object] = dict(context or {})
        super().__init__(self._render())

    def _render(self) -> str:
        details = [f"operation={self.operation}"]
        if self.word is not None:
            details.append(f"word={self.word!r}")
        if self.day_index is not None:
            details.append(f"day_index={self.day_index}")
        details.extend(f"{key}={value}" for key, value in sorted(self.context.items()))
        return f"{self.message} ({', '.join(details)})"


class DeduplicationFailure(MigrationError):
    default_stage = MigrationState.DEDUPLICATING
    default_operation = "deduplicate_store"
    default_message = "Failed to deduplicate stored words"


class ResetFailure(MigrationError):
    default_stage = MigrationState.RESETTING
    default_operation = "reset_day_indexes"
    default_message = "Failed to unset day_index assignments"


class LookupFailure(MigrationError):
    default_stage = MigrationState.RECONCILING
    default_operation = "lookup_word"
    default_message = "Failed to look up existing word"


class UpdateFailure(MigrationError):
    default_stage = MigrationState.RECONCILING
    default_operation = "update_day_index"
    default_message = "Failed to update word day_index"


class InsertFailure(MigrationError):
    default_stage = MigrationState.RECONCILING
    default_operation = "insert_word"
    default_message = "Failed to insert word"


class CommitFailure(MigrationError):
    default_stage = MigrationState.COMMITTING
    default_operation = "commit"
    default_message = "Failed to commit migration transaction"


class RollbackFailure(MigrationError):
    """The rollback triggered by ``original`` failed as well."""

    default_stage = MigrationState.ROLLED_BACK
    default_operation = "rollback"
    default_message = "Failed to roll back migration transaction"

    def __init__(self, original: MigrationError) -> None:
        self.original = original
        super().__init__(
            stage=original.stage,
            word=original.word,
            day_index=original.day_index,
            context={"original_operation": original.operation},
        )


class ValidationFailure(MigrationError):
    default_operation = "validate_store"
    default_message = "Failed to read words for validation"
