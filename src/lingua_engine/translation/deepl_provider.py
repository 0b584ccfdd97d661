"""
DeepL Translation Provider implementation.

Provides translation using the DeepL API. DeepL has no installable
language packs: a pair is INSTALLED when both languages are offered by the
account, UNSUPPORTED otherwise.
"""

import os
from typing import Any

from .interface import BaseTranslator
from .models import PairStatus

# Catalog codes whose DeepL code differs from the upper-cased catalog code
_DEEPL_SOURCE_CODES = {
    "zh-Hans": "ZH",
    "zh-Hant": "ZH",
    "pt-BR": "PT",
    "no": "NB",
}
_DEEPL_TARGET_CODES = {
    "zh-Hans": "ZH-HANS",
    "zh-Hant": "ZH-HANT",
    "pt-BR": "PT-BR",
    "en": "EN-US",
    "no": "NB",
}


def to_deepl_source(code: str) -> str:
    """Map a catalog code to a DeepL source language code."""
    return _DEEPL_SOURCE_CODES.get(code, code.split("-")[0].upper())


def to_deepl_target(code: str) -> str:
    """Map a catalog code to a DeepL target language code."""
    return _DEEPL_TARGET_CODES.get(code, code.upper())


class DeepLTranslator(BaseTranslator):
    """Translator using the DeepL API.

    Requires the `deepl` package and a valid API key.
    """

    def __init__(self, auth_key: str | None = None):
        """Initialize DeepL translator.

        Args:
            auth_key: DeepL API key (defaults to DEEPL_AUTH_KEY)

        Raises:
            ValueError: If no auth key is available
        """
        self._translator: Any = None
        self._source_codes: set[str] | None = None
        self._target_codes: set[str] | None = None
        self._ready = False

        self._init_client(auth_key)

    def _init_client(self, auth_key: str | None) -> None:
        """Initialize the DeepL API client."""
        try:
            import deepl

            auth_key = auth_key or os.environ.get("DEEPL_AUTH_KEY")
            if not auth_key:
                raise ValueError("DEEPL_AUTH_KEY environment variable is required")

            self._translator = deepl.Translator(auth_key)
            self._ready = True
        except ImportError as e:
            raise ImportError("DeepL package not installed. Run: pip install deepl>=1.16") from e

    @property
    def component_instance(self) -> str:
        """Return provider identifier."""
        return "deepl-v1"

    @property
    def is_ready(self) -> bool:
        """Check if DeepL client is ready."""
        return self._ready

    def _load_languages(self) -> None:
        if self._source_codes is None:
            self._source_codes = {lang.code.upper() for lang in self._translator.get_source_languages()}
        if self._target_codes is None:
            self._target_codes = {lang.code.upper() for lang in self._translator.get_target_languages()}

    def pair_status(self, source_language: str, target_language: str) -> PairStatus:
        """Check both languages against the account's language lists."""
        if not self._ready:
            return PairStatus.UNSUPPORTED

        self._load_languages()
        if (
            to_deepl_source(source_language) in self._source_codes
            and to_deepl_target(target_language) in self._target_codes
        ):
            return PairStatus.INSTALLED
        return PairStatus.UNSUPPORTED

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate text using DeepL API.

        Raises:
            deepl.DeepLException: On provider failures
        """
        result = self._translator.translate_text(
            text,
            source_lang=to_deepl_source(source_language),
            target_lang=to_deepl_target(target_language),
        )
        return result.text

    def shutdown(self) -> None:
        """Release DeepL client resources."""
        self._translator = None
        self._ready = False
