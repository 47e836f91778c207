"""
Pydantic models for the VocabFlow library.

These models define the stored vocabulary records and the structured
outputs returned by the enrichment providers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class MasteryLevel(str, Enum):
    """Coarse three-stage proficiency tag driving review frequency."""
    NEW = "New"
    LEARNING = "Learning"
    MASTERED = "Mastered"


class _RecordModel(BaseModel):
    """Stored records use camelCase keys, Python code uses snake_case."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---- Dictionary Data ----

class DictionaryMeaning(_RecordModel):
    """One sense returned by the dictionary lookup."""
    part_of_speech: str = ""
    definition: str = ""
    example: Optional[str] = None


class DictionaryData(_RecordModel):
    """Cached dictionary lookup result attached to an item."""
    phonetic: str = ""
    audio_url: str = ""
    meanings: list[DictionaryMeaning] = Field(default_factory=list)


# ---- Main Vocabulary Item ----

class VocabItem(_RecordModel):
    """
    A single memorized unit.

    Scheduling reads only `last_reviewed` and `mastery_level`; everything
    else is enrichment content.
    """
    id: str = Field(..., min_length=1, description="Opaque unique identifier, immutable")
    word: str = Field(..., min_length=1, description="Primary display text")

    # Enrichment content (never read by scheduling)
    user_meaning: str = ""
    context_sentence: str = ""
    notes: str = ""
    collocations: list[str] = Field(default_factory=list)
    dictionary_data: Optional[DictionaryData] = None

    # Scheduling fields
    created_at: datetime
    last_reviewed: datetime
    mastery_level: Union[MasteryLevel, str] = Field(
        default=MasteryLevel.NEW,
        union_mode="left_to_right",
        description="Unknown values are kept as plain strings so they stay reviewable",
    )

    @field_validator("created_at", "last_reviewed")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _check_review_after_creation(self) -> VocabItem:
        if self.last_reviewed < self.created_at:
            raise ValueError("last_reviewed must not be earlier than created_at")
        return self

    def to_record(self) -> dict:
        """Serialize to the stored JSON shape (camelCase keys, ISO timestamps)."""
        return self.model_dump(mode="json", by_alias=True)


# ---- AI Lookup Response Models ----

class AISearchResult(BaseModel):
    """One English word or phrase suggested for a concept."""
    word: str
    definition: str
    context: str


class AISearchResponse(BaseModel):
    """Structured output wrapper for a concept search."""
    results: list[AISearchResult] = Field(default_factory=list)


class WordDetails(BaseModel):
    """Definition and context sentence generated for a word."""
    definition: str
    context: str


class CollocationList(BaseModel):
    """Structured output wrapper for collocation suggestions."""
    collocations: list[str] = Field(default_factory=list)
