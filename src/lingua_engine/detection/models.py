"""
Pydantic data models for language detection.
"""

from pydantic import BaseModel, Field


class DetectionHypothesis(BaseModel):
    """A ranked, catalog-filtered language hypothesis."""

    language: str = Field(..., description="Catalog language code")
    raw_confidence: float = Field(..., ge=0.0, le=1.0, description="Identifier confidence")
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Adjusted confidence after preference boost"
    )
    is_downloaded: bool = Field(
        default=True, description="Whether the language is installed on this device"
    )

    @property
    def is_boosted(self) -> bool:
        return self.confidence > self.raw_confidence


class SourceResolution(BaseModel):
    """The effective source language of a run."""

    language: str = Field(..., description="Resolved source language code")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Detection confidence")
    manual: bool = Field(default=False, description="True if set by manual override")
