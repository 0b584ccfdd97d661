"""
Shared pytest fixtures for translation engine tests.
"""

import pytest
import structlog

from lingua_engine.config import (
    DetectionConfig,
    EngineConfig,
    MemoryConfig,
    ObservabilityConfig,
    SchedulerConfig,
    reset_config,
)
from lingua_engine.detection import LanguageDetector
from lingua_engine.detection.mock import MockIdentifierConfig, MockLanguageIdentifier
from lingua_engine.romanization import Romanizer
from lingua_engine.romanization.mock import MockTransliterator, MockTransliteratorConfig
from lingua_engine.translation import FanOutTranslator
from lingua_engine.translation.mock import MockTranslator, MockTranslatorConfig

# -----------------------------------------------------------------------------
# Canned identifier output
# -----------------------------------------------------------------------------

IDENTIFIER_FIXTURES = {
    "Bonjour": [("fr", 0.6), ("en", 0.3), ("it", 0.1)],
    "Hello there": [("en", 0.95), ("nl", 0.03)],
    "你好": [("zh-cn", 0.99)],
    "Hola amigo": [("es", 0.8), ("pt", 0.15)],
}


@pytest.fixture(autouse=True)
def _reset_global_config():
    """Keep the global config and logging setup isolated between tests."""
    reset_config()
    yield
    reset_config()
    structlog.reset_defaults()


@pytest.fixture
def engine_config() -> EngineConfig:
    """Config with a short debounce for fast scheduler tests."""
    return EngineConfig(
        detection=DetectionConfig(max_hypotheses=5, identifier_top_k=10, preferred_boost=0.2),
        memory=MemoryConfig(similarity_threshold=0.7, max_suggestions=5),
        scheduler=SchedulerConfig(debounce_ms=20, include_romanization=True, auto_save=False),
        observability=ObservabilityConfig(log_level="DEBUG"),
    )


@pytest.fixture
def identifier() -> MockLanguageIdentifier:
    return MockLanguageIdentifier(MockIdentifierConfig(hypotheses=dict(IDENTIFIER_FIXTURES)))


@pytest.fixture
def detector(identifier: MockLanguageIdentifier) -> LanguageDetector:
    return LanguageDetector(identifier)


@pytest.fixture
def transliterator() -> MockTransliterator:
    return MockTransliterator(
        MockTransliteratorConfig(
            transforms={
                ("你好", "Han-Latin"): "nǐ hǎo",
                ("[zh-Hans] Bonjour", "Han-Latin"): "bonjour",
                ("[ja] Bonjour", "Any-Latin"): "bonjūru",
            }
        )
    )


@pytest.fixture
def romanizer(transliterator: MockTransliterator) -> Romanizer:
    return Romanizer(transliterator)


@pytest.fixture
def translator() -> MockTranslator:
    """Translator with fr, en, es installed; ja supported but not installed."""
    return MockTranslator(MockTranslatorConfig(installed_languages={"fr", "en", "es"}))


@pytest.fixture
def fanout(translator: MockTranslator, romanizer: Romanizer) -> FanOutTranslator:
    return FanOutTranslator(translator, romanizer)
