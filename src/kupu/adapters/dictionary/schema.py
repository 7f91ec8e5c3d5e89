"""Pydantic models describing the dictionary JSON document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kupu.domain.model import DAY_INDEX_MAX, DAY_INDEX_MIN

type DictionaryPayloadInput = DictionaryPayload | Mapping[str, Any]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class DictionaryBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DictionaryWordPayload(DictionaryBaseModel):
    index: int = Field(ge=DAY_INDEX_MIN, le=DAY_INDEX_MAX)
    word: str = Field(min_length=1)
    meaning: str
    link: str | None = None
    photo: str | None = None
    photo_attribution: str | None = None

    _normalize_optional = field_validator("link", "photo", "photo_attribution", mode="before")(
        _blank_to_none
    )


class DictionaryPayload(DictionaryBaseModel):
    words: list[DictionaryWordPayload] = Field(alias="dictionary")
