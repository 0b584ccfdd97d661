"""
Translation component.

Provides concurrent fan-out translation over an external Translator, with
priority-first streaming delivery and partial-failure tolerance.

Exports:
    - FanOutTranslator: Concurrent per-target dispatch with streaming
    - create_translator: Factory function for Translator creation
    - Translator: Protocol interface
    - BaseTranslator: Abstract base class
    - TranslationRequest / TranslationOutcome / FanOutResult: Models
    - PairStatus: Pair availability enum
    - TranslationError / TranslationErrorType: Error model and enum
    - TranslationEngineError and subclasses: Terminal error kinds
"""

from .errors import (
    DetectionFailedError,
    EmptyInputError,
    InvalidConfigurationError,
    MissingLanguagePacksError,
    TranslationEngineError,
    TranslationFailedError,
)
from .factory import create_translator
from .fanout import FanOutTranslator
from .interface import BaseTranslator, Translator
from .models import (
    FanOutResult,
    PairStatus,
    TranslationError,
    TranslationErrorType,
    TranslationOutcome,
    TranslationRequest,
)

__all__ = [
    # Fan-out
    "FanOutTranslator",
    # Factory
    "create_translator",
    # Interface
    "Translator",
    "BaseTranslator",
    # Models
    "FanOutResult",
    "PairStatus",
    "TranslationError",
    "TranslationErrorType",
    "TranslationOutcome",
    "TranslationRequest",
    # Errors
    "TranslationEngineError",
    "EmptyInputError",
    "DetectionFailedError",
    "MissingLanguagePacksError",
    "TranslationFailedError",
    "InvalidConfigurationError",
]
