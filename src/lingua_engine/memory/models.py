"""
Pydantic data models for translation memory.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

HIGH_CONFIDENCE_SIMILARITY = 0.9
MEDIUM_CONFIDENCE_SIMILARITY = 0.7


class PriorTranslation(BaseModel):
    """One target translation stored with a history record."""

    target_language: str = Field(..., description="Target language code")
    translated_text: str = Field(..., description="Translated text")
    romanization: str | None = Field(default=None, description="Target romanization")


class HistoryRecord(BaseModel):
    """A previously translated input, as read from the history store."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Group identifier")
    source_text: str = Field(..., description="Original source text")
    source_language: str | None = Field(default=None, description="Source language code")
    translations: list[PriorTranslation] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class MemorySuggestion(BaseModel):
    """A fuzzy-matched reuse suggestion."""

    source_text: str = Field(..., description="Original source text of the record")
    translations: list[PriorTranslation] = Field(default_factory=list)
    similarity: float = Field(..., ge=0.0, le=1.0, description="Similarity to the query")
    last_used: datetime = Field(..., description="Timestamp of the matched record")

    @property
    def similarity_percentage(self) -> str:
        return f"{self.similarity * 100:.0f}%"

    @property
    def is_high_confidence(self) -> bool:
        return self.similarity >= HIGH_CONFIDENCE_SIMILARITY

    @property
    def is_medium_confidence(self) -> bool:
        return MEDIUM_CONFIDENCE_SIMILARITY <= self.similarity < HIGH_CONFIDENCE_SIMILARITY
