"""Read dictionary files into ordered source entries."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from kupu.config.migration import DEFAULT_MAX_INPUT_BYTES

from .schema import DictionaryPayload
from .translator import to_source_entries

if TYPE_CHECKING:
    from pathlib import Path

    from kupu.domain.model import SourceEntry

log = getLogger(__name__)


class DictionarySourceError(RuntimeError):
    """Raised when a dictionary file cannot be read or parsed."""

    def __init__(self, message: str, *, operation: str, path: Path | None = None) -> None:
        self.operation = operation
        self.path = path
        detail = f"operation={operation}"
        if path is not None:
            detail += f", file_path={path}"
        super().__init__(f"{message} ({detail})")


def parse_dictionary(data: bytes | str, *, path: Path | None = None) -> list[SourceEntry]:
    """Parse a ``{"dictionary": [...]}`` document."""

    try:
        document = DictionaryPayload.model_validate_json(data)
    except ValidationError as exc:
        raise DictionarySourceError(
            f"Failed to parse dictionary JSON: {exc.error_count()} error(s)",
            operation="parse_json",
            path=path,
        ) from exc
    return to_source_entries(document)


def read_dictionary_file(
    path: Path,
    *,
    max_bytes: int = DEFAULT_MAX_INPUT_BYTES,
) -> list[SourceEntry]:
    """Read and parse the dictionary at ``path``."""

    log.info("Reading dictionary file: file_path=%s", path)
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise DictionarySourceError(
            "Failed to read dictionary file", operation="read_file", path=path
        ) from exc
    if size > max_bytes:
        raise DictionarySourceError(
            f"Dictionary file is too large ({size} > {max_bytes} bytes)",
            operation="file_too_large",
            path=path,
        )
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DictionarySourceError(
            "Failed to read dictionary file", operation="read_file", path=path
        ) from exc

    entries = parse_dictionary(data, path=path)
    log.info("Parsed dictionary file: file_path=%s, word_count=%s", path, len(entries))
    return entries
