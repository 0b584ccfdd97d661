"""
Pydantic data models for the Translation component.

Defines typed input/output contracts for fan-out translation.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from lingua_engine.languages import display_name

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class PairStatus(str, Enum):
    """Availability of a source/target language pair."""

    INSTALLED = "installed"  # Resources present, ready to translate
    SUPPORTED = "supported"  # Supported but resources not installed
    UNSUPPORTED = "unsupported"  # Pair cannot be translated


class TranslationErrorType(str, Enum):
    """Classification of Translation errors for orchestration policies."""

    EMPTY_INPUT = "empty_input"  # Blank source text
    DETECTION_FAILED = "detection_failed"  # No usable language hypothesis
    MISSING_LANGUAGE_PACKS = "missing_language_packs"  # All targets unavailable
    TRANSLATION_FAILED = "translation_failed"  # Single target failed
    INVALID_CONFIGURATION = "invalid_configuration"  # No target languages selected
    PROVIDER_ERROR = "provider_error"  # Translation provider failure
    TIMEOUT = "timeout"  # Processing exceeded deadline
    UNKNOWN = "unknown"  # Unclassified failure


# -----------------------------------------------------------------------------
# Error Model
# -----------------------------------------------------------------------------


class TranslationError(BaseModel):
    """Structured error information for a failed translation unit."""

    error_type: TranslationErrorType = Field(..., description="Error classification")
    message: str = Field(..., description="Human-readable error message (safe for logs)")
    retryable: bool = Field(..., description="Whether this error is worth retrying")
    language: str | None = Field(default=None, description="Target language that failed")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional error context (debug info)"
    )


# -----------------------------------------------------------------------------
# Request / Outcome Models
# -----------------------------------------------------------------------------


class TranslationRequest(BaseModel):
    """One pipeline run's input, stamped with the generation that owns it."""

    generation: int = Field(..., ge=0, description="Generation token of the owning run")
    text: str = Field(..., description="Source text")
    manual_source: str | None = Field(
        default=None, description="Manually selected source language (overrides detection)"
    )
    targets: list[str] = Field(default_factory=list, description="Target language codes")
    priority_language: str | None = Field(
        default=None, description="Target to translate and deliver first"
    )

    def without_source(self, source_language: str) -> "TranslationRequest":
        """Return a copy whose target set excludes the resolved source."""
        targets = [t for t in self.targets if t != source_language]
        priority = self.priority_language if self.priority_language != source_language else None
        return self.model_copy(update={"targets": targets, "priority_language": priority})


class TranslationOutcome(BaseModel):
    """A successful translation into one target language."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identity of this outcome",
    )
    target_language: str = Field(..., description="Target language code")
    source_language: str = Field(..., description="Resolved source language code")
    translated_text: str = Field(..., description="Translated text")
    detection_confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Confidence of the source resolution"
    )
    source_romanization: str | None = Field(
        default=None, description="Latin transliteration of the source text"
    )
    target_romanization: str | None = Field(
        default=None, description="Latin transliteration of the translated text"
    )
    romanization_system: str | None = Field(
        default=None, description="Romanization system used for the target text"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow, description="Timestamp of outcome creation"
    )

    @property
    def language_name(self) -> str:
        """Human-readable target language name."""
        return display_name(self.target_language)

    @property
    def is_source_language(self) -> bool:
        """Whether this outcome echoes the source language."""
        return self.target_language == self.source_language

    @property
    def confidence_percentage(self) -> str:
        """Detection confidence as a percentage string."""
        return f"{self.detection_confidence * 100:.0f}%"


class FanOutResult(BaseModel):
    """Aggregate result of one fan-out invocation."""

    source_language: str = Field(..., description="Resolved source language")
    outcomes: list[TranslationOutcome] = Field(
        default_factory=list, description="Successful outcomes sorted by display name"
    )
    attempted: list[str] = Field(
        default_factory=list, description="Targets counted as attempted (incl. skipped)"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Targets whose pair was unavailable"
    )
    failures: list[TranslationError] = Field(
        default_factory=list, description="Per-language translation failures"
    )
    priority_language: str | None = Field(
        default=None, description="Priority target delivered ahead of the others"
    )

    @property
    def all_failed(self) -> bool:
        """True when targets were attempted but nothing succeeded."""
        return len(self.attempted) > 0 and not self.outcomes

    @property
    def succeeded(self) -> list[str]:
        """Target languages that produced an outcome."""
        return [o.target_language for o in self.outcomes]
