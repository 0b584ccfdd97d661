"""
Language detection component.

Exports:
    - LanguageDetector: Confidence-ranked, catalog-filtered detection
    - resolve_source / reassign_priority: Source resolution
    - DetectionHypothesis / SourceResolution: Models
    - LanguageIdentifier: Protocol for the external identifier
    - create_language_identifier: Factory function
"""

from .detector import LanguageDetector
from .factory import create_language_identifier
from .interface import LanguageIdentifier
from .models import DetectionHypothesis, SourceResolution
from .resolver import reassign_priority, resolve_source

__all__ = [
    "LanguageDetector",
    "LanguageIdentifier",
    "DetectionHypothesis",
    "SourceResolution",
    "create_language_identifier",
    "reassign_priority",
    "resolve_source",
]
