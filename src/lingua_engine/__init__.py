"""
Translation orchestration engine.

Detects the language of typed text, resolves a source language, fans the
text out to every selected target concurrently, romanizes non-Latin
scripts and suggests reuse from translation memory.
"""

from .config import EngineConfig, get_config
from .detection import LanguageDetector, resolve_source
from .memory import TranslationMemoryMatcher
from .pipeline import TranslationSession, create_session
from .romanization import Romanizer
from .translation import (
    FanOutTranslator,
    TranslationEngineError,
    TranslationOutcome,
)

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "get_config",
    "LanguageDetector",
    "resolve_source",
    "TranslationMemoryMatcher",
    "TranslationSession",
    "create_session",
    "Romanizer",
    "FanOutTranslator",
    "TranslationEngineError",
    "TranslationOutcome",
]
