"""
Language identifier backed by langdetect.
"""

from langdetect import DetectorFactory, LangDetectException, detect_langs

from lingua_engine.observability import get_logger

# Reproducible results across runs
DetectorFactory.seed = 0


class LangDetectIdentifier:
    """LanguageIdentifier using langdetect's probabilistic detector."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    @property
    def component_instance(self) -> str:
        return "langdetect-v1"

    def identify(self, text: str, max_results: int = 10) -> list[tuple[str, float]]:
        try:
            languages = detect_langs(text)
        except LangDetectException as e:
            # Raised for input without detectable features (digits, symbols)
            self.logger.debug("langdetect_no_features", error=str(e))
            return []

        ranked = sorted(((lang.lang, float(lang.prob)) for lang in languages), key=lambda p: -p[1])
        return ranked[:max_results]
