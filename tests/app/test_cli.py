from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kupu.domain.migration import (
    InsertFailure,
    MigrationPreview,
    MigrationResult,
    StoreValidation,
    ValidationFailure,
)
from kupu.ui import cli as cli_module


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.json"
    path.write_text('{"dictionary": []}', encoding="utf-8")
    return path


@pytest.fixture
def log_levels(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    levels: list[int] = []

    def fake_configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
        _ = force
        levels.append(level)

    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)
    return levels


def test_migrate_passes_paths(
    monkeypatch: pytest.MonkeyPatch,
    dictionary_file: Path,
    tmp_path: Path,
    log_levels: list[int],
) -> None:
    captured: dict[str, object] = {}

    def fake_migrate(input_path: Path, **kwargs: object) -> MigrationResult:
        captured["input_path"] = input_path
        captured.update(kwargs)
        return MigrationResult(updated=1, inserted=2, preserved=3)

    monkeypatch.setattr(cli_module, "migrate_dictionary", fake_migrate)

    cli_module.main(["migrate", "--input", str(dictionary_file), "--db", str(tmp_path / "w.db")])

    assert captured["input_path"] == dictionary_file
    assert captured["database_path"] == tmp_path / "w.db"
    assert log_levels == [logging.INFO]


def test_migrate_without_db_uses_config(
    monkeypatch: pytest.MonkeyPatch,
    dictionary_file: Path,
    log_levels: list[int],
) -> None:
    captured: dict[str, object] = {}

    def fake_migrate(input_path: Path, **kwargs: object) -> MigrationResult:
        _ = input_path
        captured.update(kwargs)
        return MigrationResult(updated=0, inserted=0, preserved=0)

    monkeypatch.setattr(cli_module, "migrate_dictionary", fake_migrate)

    cli_module.main(["-v", "migrate", "--input", str(dictionary_file)])

    assert captured["database_path"] is None
    assert log_levels == [logging.DEBUG]


def test_dry_run_only_previews(
    monkeypatch: pytest.MonkeyPatch,
    dictionary_file: Path,
    log_levels: list[int],
) -> None:
    previewed: list[Path] = []

    def fake_preview(input_path: Path) -> MigrationPreview:
        previewed.append(input_path)
        return MigrationPreview(entry_count=0, missing_day_indexes=(1, 2))

    def fail_migrate(*_: object, **__: object) -> MigrationResult:
        pytest.fail("dry run must not migrate")

    monkeypatch.setattr(cli_module, "preview_dictionary", fake_preview)
    monkeypatch.setattr(cli_module, "migrate_dictionary", fail_migrate)

    cli_module.main(["-q", "migrate", "--input", str(dictionary_file), "--dry-run"])

    assert previewed == [dictionary_file]
    assert log_levels == [logging.WARNING]


@pytest.mark.parametrize("value", ["../dictionary.json", "does-not-exist.json"])
def test_invalid_input_path_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch,
    log_levels: list[int],
    value: str,
) -> None:
    def fail_migrate(*_: object, **__: object) -> MigrationResult:
        pytest.fail("invalid input must not migrate")

    monkeypatch.setattr(cli_module, "migrate_dictionary", fail_migrate)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["migrate", "--input", value])

    assert excinfo.value.code == 2
    assert log_levels == [logging.INFO]


def test_migration_failure_exits_nonzero(
    monkeypatch: pytest.MonkeyPatch,
    dictionary_file: Path,
    log_levels: list[int],
) -> None:
    def failing_migrate(*_: object, **__: object) -> MigrationResult:
        raise InsertFailure(word="aroha", day_index=1)

    monkeypatch.setattr(cli_module, "migrate_dictionary", failing_migrate)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["migrate", "--input", str(dictionary_file)])

    assert excinfo.value.code == 1
    assert log_levels == [logging.INFO]


def test_command_is_required(log_levels: list[int]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
    assert log_levels == []


def test_validate_passes_db_and_succeeds(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    log_levels: list[int],
) -> None:
    captured: dict[str, object] = {}

    def fake_validate(**kwargs: object) -> StoreValidation:
        captured.update(kwargs)
        return StoreValidation(total_words=366, assigned_words=366)

    monkeypatch.setattr(cli_module, "validate_database", fake_validate)

    cli_module.main(["validate", "--db", str(tmp_path / "w.db")])

    assert captured == {"database_path": tmp_path / "w.db"}
    assert log_levels == [logging.INFO]


def test_invalid_store_exits_nonzero_and_lists_missing(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    log_levels: list[int],
) -> None:
    missing = tuple(range(2, 367))

    def fake_validate(**_: object) -> StoreValidation:
        return StoreValidation(
            total_words=1,
            assigned_words=1,
            missing_day_indexes=missing,
            errors=("expected 366 assigned words, found 1",),
        )

    monkeypatch.setattr(cli_module, "validate_database", fake_validate)
    caplog.set_level(logging.INFO, logger="kupu.ui.cli")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["validate"])

    assert excinfo.value.code == 1
    assert "count=365" in caplog.text
    assert str(list(range(2, 22))) in caplog.text
    assert "22, 23" not in caplog.text
    assert log_levels == [logging.INFO]


def test_validation_error_exits_nonzero(
    monkeypatch: pytest.MonkeyPatch,
    log_levels: list[int],
) -> None:
    def failing_validate(**_: object) -> StoreValidation:
        raise ValidationFailure()

    monkeypatch.setattr(cli_module, "validate_database", failing_validate)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["validate"])

    assert excinfo.value.code == 1
    assert log_levels == [logging.INFO]
