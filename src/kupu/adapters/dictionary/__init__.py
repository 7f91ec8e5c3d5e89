"""Public interface for the dictionary file adapter."""

from __future__ import annotations

from .reader import DictionarySourceError, parse_dictionary, read_dictionary_file
from .schema import DictionaryPayload, DictionaryPayloadInput, DictionaryWordPayload
from .translator import to_source_entries, to_source_entry

__all__ = [
    "DictionaryPayload",
    "DictionaryPayloadInput",
    "DictionarySourceError",
    "DictionaryWordPayload",
    "parse_dictionary",
    "read_dictionary_file",
    "to_source_entries",
    "to_source_entry",
]
