from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from kupu.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyWordUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from tests.helpers.words import make_word

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyWordUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b
    assert is_started()


def test_shutdown_resets_state(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    shutdown()

    assert configured_engine() is None
    assert not is_started()


def test_repositories_require_open_session(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    uow = SqlAlchemyWordUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.repositories


def test_unit_of_work_persists_words(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyWordUnitOfWork() as uow:
        word = make_word("kia ora", day_index=1)
        uow.repositories.words.add(word)
        uow.commit()
        word_id = word.id

    with SqlAlchemyWordUnitOfWork() as uow:
        stored = uow.repositories.words.get_by_day_index(1)
        assert stored is not None
        assert stored.id == word_id
        assert stored.word == "kia ora"


def test_explicit_rollback_discards_changes(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyWordUnitOfWork() as uow:
        uow.repositories.words.add(make_word("kia ora"))
        uow.rollback()

    with SqlAlchemyWordUnitOfWork() as uow:
        assert uow.repositories.words.count() == 0


def test_exception_inside_block_rolls_back(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with pytest.raises(RuntimeError), SqlAlchemyWordUnitOfWork() as uow:
        uow.repositories.words.add(make_word("kia ora"))
        raise RuntimeError("boom")

    with SqlAlchemyWordUnitOfWork() as uow:
        assert uow.repositories.words.count() == 0
