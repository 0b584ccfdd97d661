"""
Language Detector & Ranker.

Wraps an external identifier and produces confidence-ranked hypotheses
restricted to the supported-language catalog.
"""

from collections.abc import Iterable

from lingua_engine.languages import find_matching_language
from lingua_engine.observability import get_logger

from .interface import LanguageIdentifier
from .models import DetectionHypothesis

DEFAULT_MAX_RESULTS = 5
DEFAULT_IDENTIFIER_TOP_K = 10
DEFAULT_PREFERRED_BOOST = 0.2


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class LanguageDetector:
    """Ranks identifier hypotheses against user preferences.

    Steps:
    1. Ask the identifier for its top-K raw hypotheses
    2. Drop languages outside the supported catalog
    3. Flag installed languages (everything counts as installed when no set is given)
    4. Boost preferred languages, clamped to 1.0
    5. Sort descending by adjusted confidence and truncate
    """

    def __init__(
        self,
        identifier: LanguageIdentifier,
        identifier_top_k: int = DEFAULT_IDENTIFIER_TOP_K,
        preferred_boost: float = DEFAULT_PREFERRED_BOOST,
    ):
        self._identifier = identifier
        self._identifier_top_k = identifier_top_k
        self._preferred_boost = preferred_boost
        self.logger = get_logger(__name__)

    def detect(
        self,
        text: str,
        preferred_languages: Iterable[str] | None = None,
        installed_languages: Iterable[str] | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[DetectionHypothesis]:
        """Detect candidate languages for text.

        Args:
            text: Text to analyze
            preferred_languages: Languages to boost (e.g., user-selected languages)
            installed_languages: Languages available on this device
            max_results: Maximum number of hypotheses returned

        Returns:
            Hypotheses sorted by adjusted confidence, highest first. Empty when
            the text is blank or nothing usable was identified.
        """
        if not text.strip():
            self.logger.debug("detection_skipped_empty_text")
            return []

        raw = self._identifier.identify(text, max_results=self._identifier_top_k)
        if not raw:
            self.logger.warning("detection_no_hypotheses")
            return []

        preferred = set(preferred_languages) if preferred_languages is not None else None
        installed = set(installed_languages) if installed_languages is not None else None

        results: dict[str, DetectionHypothesis] = {}
        for identifier_code, raw_confidence in raw:
            language = find_matching_language(identifier_code)
            if language is None:
                self.logger.debug("detection_unsupported_language", language=identifier_code)
                continue

            # Variants collapsing onto one catalog code keep the strongest
            if language in results and results[language].raw_confidence >= raw_confidence:
                continue

            raw_clamped = _clamp(raw_confidence)
            adjusted = raw_clamped
            if preferred is not None and language in preferred:
                adjusted = _clamp(raw_clamped + self._preferred_boost)

            results[language] = DetectionHypothesis(
                language=language,
                raw_confidence=raw_clamped,
                confidence=adjusted,
                is_downloaded=installed is None or language in installed,
            )

        ranked = sorted(results.values(), key=lambda h: h.confidence, reverse=True)[:max_results]

        self.logger.info(
            "languages_detected",
            hypotheses=[f"{h.language}({h.confidence:.2f})" for h in ranked],
        )
        return ranked

    def detect_primary(self, text: str) -> tuple[str | None, float]:
        """Return the most likely language and its confidence, or (None, 0.0)."""
        results = self.detect(text, max_results=1)
        if not results:
            return None, 0.0
        return results[0].language, results[0].confidence
