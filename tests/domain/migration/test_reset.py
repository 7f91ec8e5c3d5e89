from __future__ import annotations

import pytest

from kupu.domain.migration import ResetFailure, assigned_word_ids, reset_assignments
from tests.helpers.words import RUN_TIME, FakeWordRepository, StoreError, make_word


def test_assigned_word_ids_lists_only_scheduled_words() -> None:
    repo = FakeWordRepository(
        [
            make_word("kia ora", word_id=1, day_index=1),
            make_word("aroha", word_id=2),
            make_word("whānau", word_id=3, day_index=20),
        ]
    )

    assert assigned_word_ids(repo) == frozenset({1, 3})


def test_reset_assignments_moves_words_to_word_bank() -> None:
    repo = FakeWordRepository(
        [
            make_word("kia ora", day_index=1),
            make_word("aroha"),
            make_word("whānau", day_index=20),
        ]
    )

    cleared = reset_assignments(repo, now=RUN_TIME)

    assert cleared == 2
    assert repo.count_assigned() == 0
    assert repo.count() == 3
    assert repo.by_text("kia ora").updated_at == RUN_TIME
    assert repo.by_text("aroha").updated_at != RUN_TIME


def test_reset_assignments_wraps_store_errors() -> None:
    repo = FakeWordRepository([make_word(day_index=1)], fail_on={"clear_day_indexes": None})

    with pytest.raises(ResetFailure) as exc_info:
        reset_assignments(repo, now=RUN_TIME)

    assert exc_info.value.operation == "reset_day_indexes"
    assert isinstance(exc_info.value.__cause__, StoreError)


def test_assigned_word_ids_wraps_store_errors() -> None:
    repo = FakeWordRepository(fail_on={"assigned_ids": None})

    with pytest.raises(ResetFailure) as exc_info:
        assigned_word_ids(repo)

    assert exc_info.value.operation == "read_assignments"
