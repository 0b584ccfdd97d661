"""
ICU Transliterator provider.

Requires the optional `PyICU` package (pip install lingua-engine[icu]).
"""

import threading
from typing import Any


class IcuTransliterator:
    """Transliterator backed by ICU transforms."""

    def __init__(self) -> None:
        try:
            import icu
        except ImportError as e:
            raise ImportError("PyICU package not installed. Run: pip install PyICU>=2.11") from e

        self._icu = icu
        self._instances: dict[str, Any] = {}
        self._lock = threading.Lock()

    @property
    def component_instance(self) -> str:
        return "icu-transliterator"

    def _get_instance(self, system_id: str) -> Any:
        with self._lock:
            instance = self._instances.get(system_id)
            if instance is None:
                instance = self._icu.Transliterator.createInstance(system_id)
                self._instances[system_id] = instance
            return instance

    def transform(self, text: str, system_id: str) -> str:
        return self._get_instance(system_id).transliterate(text)
