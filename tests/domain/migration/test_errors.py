from __future__ import annotations

from kupu.domain.migration import (
    CommitFailure,
    InsertFailure,
    MigrationError,
    MigrationState,
    RollbackFailure,
    UpdateFailure,
)


def test_failure_message_names_operation_word_and_day_index() -> None:
    failure = UpdateFailure(word="kia ora", day_index=12)

    assert str(failure) == (
        "Failed to update word day_index (operation=update_day_index, word='kia ora', day_index=12)"
    )
    assert failure.stage is MigrationState.RECONCILING


def test_failure_message_includes_sorted_context() -> None:
    failure = CommitFailure(context={"updated": 3, "inserted": 1})

    assert str(failure) == (
        "Failed to commit migration transaction (operation=commit, inserted=1, updated=3)"
    )


def test_explicit_message_and_operation_override_defaults() -> None:
    failure = InsertFailure("Could not insert", operation="insert_batch")

    assert failure.message == "Could not insert"
    assert failure.operation == "insert_batch"
    assert str(failure) == "Could not insert (operation=insert_batch)"


def test_rollback_failure_wraps_original() -> None:
    original = InsertFailure(word="aroha", day_index=2)

    failure = RollbackFailure(original)

    assert isinstance(failure, MigrationError)
    assert failure.original is original
    assert failure.stage is MigrationState.RECONCILING
    assert failure.operation == "rollback"
    assert failure.word == "aroha"
    assert failure.day_index == 2
    assert "original_operation=insert_word" in str(failure)


def test_terminal_states() -> None:
    assert MigrationState.COMMITTED.is_terminal
    assert MigrationState.ROLLED_BACK.is_terminal
    assert not MigrationState.RECONCILING.is_terminal
