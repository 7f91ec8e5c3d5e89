"""Translate dictionary payloads into source entries."""

from __future__ import annotations

from kupu.domain.model import SourceEntry

from .schema import DictionaryPayload, DictionaryPayloadInput, DictionaryWordPayload


def _ensure_payload(document: DictionaryPayloadInput) -> DictionaryPayload:
    if isinstance(document, DictionaryPayload):
        return document
    return DictionaryPayload.model_validate(document)


def to_source_entry(payload: DictionaryWordPayload) -> SourceEntry:
    # Word text is kept verbatim: matching against the store is exact.
    return SourceEntry(
        day_index=payload.index,
        word=payload.word,
        meaning=payload.meaning,
        link=payload.link,
        photo=payload.photo,
        photo_attribution=payload.photo_attribution,
    )


def to_source_entries(document: DictionaryPayloadInput) -> list[SourceEntry]:
    """Source entries in document order, duplicates included."""
    return [to_source_entry(word) for word in _ensure_payload(document).words]
