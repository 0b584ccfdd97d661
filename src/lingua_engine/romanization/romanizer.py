"""
Romanizer: optional script-to-Latin transliteration.

Failures never propagate; a failed or skipped romanization is simply None.
"""

import unicodedata

from lingua_engine.languages import Script
from lingua_engine.observability import get_logger

from .interface import Transliterator
from .models import RomanizationSystem, default_system, systems_for


def strip_diacritics(text: str) -> str:
    """Remove combining marks (tone marks, accents): 'nǐ hǎo' -> 'ni hao'."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", stripped)


class Romanizer:
    """Romanizes text using the static script -> system table."""

    def __init__(self, transliterator: Transliterator):
        self._transliterator = transliterator
        self.logger = get_logger(__name__)

    def needs_romanization(self, language: str) -> bool:
        """Check if a language uses a non-Latin script."""
        return Script.detect(language).needs_romanization

    def available_systems(self, language: str) -> tuple[RomanizationSystem, ...]:
        return systems_for(language)

    def romanize(
        self,
        text: str,
        language: str,
        system: RomanizationSystem | None = None,
    ) -> str | None:
        """Romanize text for a language.

        Args:
            text: Text to romanize
            language: Language code of the text
            system: Explicit system; defaults to the language's default system

        Returns:
            Latin transliteration, or None when skipped or on failure
        """
        if not text:
            return None

        if not self.needs_romanization(language):
            return None

        romanization_system = system or default_system(language)
        if romanization_system is None:
            self.logger.debug("romanization_no_system", language=language)
            return None

        try:
            result = self._transliterator.transform(text, romanization_system.transform_id)
            if romanization_system.strip_diacritics:
                result = strip_diacritics(result)
        except Exception as e:
            self.logger.warning(
                "romanization_failed",
                language=language,
                system=romanization_system.value,
                error=str(e),
            )
            return None

        return result
