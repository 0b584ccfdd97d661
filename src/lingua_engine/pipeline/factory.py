"""
Factory function for creating translation sessions.

Wires the detector, romanizer, fan-out translator, memory matcher and
coordinator from configuration, with mock capabilities for testing.
"""

from collections.abc import Iterable

from lingua_engine.config import EngineConfig, get_config
from lingua_engine.detection import LanguageDetector, LanguageIdentifier, create_language_identifier
from lingua_engine.memory import HistoryStore, InMemoryHistoryStore, TranslationMemoryMatcher
from lingua_engine.observability import setup_logging
from lingua_engine.romanization import Romanizer, Transliterator, create_transliterator
from lingua_engine.translation import FanOutTranslator, Translator, create_translator

from .coordinator import PipelineCoordinator
from .session import ErrorListener, ResultListener, TranslationSession


def create_session(
    selected_languages: Iterable[str],
    installed_languages: Iterable[str] | None = None,
    priority_language: str | None = None,
    translator: Translator | None = None,
    identifier: LanguageIdentifier | None = None,
    transliterator: Transliterator | None = None,
    store: HistoryStore | None = None,
    config: EngineConfig | None = None,
    mock: bool = False,
    on_result: ResultListener | None = None,
    on_error: ErrorListener | None = None,
) -> TranslationSession:
    """Create a TranslationSession with its full pipeline.

    Args:
        selected_languages: Languages the user translates between
        installed_languages: Languages available on this device (None = all)
        priority_language: Target delivered first
        translator: Translation capability (defaults to the factory's choice)
        identifier: Language identifier (defaults to the factory's choice)
        transliterator: Transform capability (defaults to the factory's choice)
        store: History store (defaults to an in-memory store)
        config: Engine configuration (defaults to the global config)
        mock: Use mock capabilities for anything not passed explicitly
        on_result: Listener for streamed outcomes
        on_error: Listener for terminal errors

    Returns:
        Configured TranslationSession
    """
    config = config or get_config()
    setup_logging(config.observability)

    translator = translator or create_translator(mock=mock)
    identifier = identifier or create_language_identifier(mock=mock)
    transliterator = transliterator or create_transliterator(mock=mock)
    store = store if store is not None else InMemoryHistoryStore()

    detector = LanguageDetector(
        identifier,
        identifier_top_k=config.detection.identifier_top_k,
        preferred_boost=config.detection.preferred_boost,
    )
    fanout = FanOutTranslator(translator, Romanizer(transliterator))
    coordinator = PipelineCoordinator(
        detector,
        fanout,
        max_hypotheses=config.detection.max_hypotheses,
        include_romanization=config.scheduler.include_romanization,
    )
    matcher = TranslationMemoryMatcher(
        store,
        similarity_threshold=config.memory.similarity_threshold,
        max_suggestions=config.memory.max_suggestions,
    )

    return TranslationSession(
        coordinator,
        selected_languages=selected_languages,
        installed_languages=installed_languages,
        priority_language=priority_language,
        matcher=matcher,
        store=store,
        config=config,
        on_result=on_result,
        on_error=on_error,
    )
