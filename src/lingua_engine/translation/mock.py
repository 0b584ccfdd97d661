"""
Mock Translators for testing.

Provides deterministic behavior without real translation services.
"""

import threading
import time
from dataclasses import dataclass, field

from .interface import BaseTranslator
from .models import PairStatus


@dataclass
class MockTranslatorConfig:
    """Configuration for mock translator behavior.

    Used for deterministic testing without real translation.
    """

    # None = every pair installed
    installed_languages: set[str] | None = None
    unsupported_languages: set[str] = field(default_factory=set)
    # Canned translations keyed by (text, target_language)
    dictionary: dict[tuple[str, str], str] = field(default_factory=dict)
    simulate_latency_ms: int = 0
    latency_by_language: dict[str, int] = field(default_factory=dict)
    failing_languages: set[str] = field(default_factory=set)


class MockTranslator(BaseTranslator):
    """Deterministic mock translator.

    Returns canned dictionary translations when configured, otherwise tags
    the source text with the target code: "[es] hello". Translating an
    uninstalled pair raises, as real providers do.
    """

    def __init__(self, config: MockTranslatorConfig | None = None):
        """Initialize mock with configuration.

        Args:
            config: Mock behavior configuration
        """
        self._config = config or MockTranslatorConfig()
        self._ready = True
        self._lock = threading.Lock()
        self.calls: list[tuple[str, str, str]] = []

    @property
    def component_instance(self) -> str:
        """Return mock instance identifier."""
        return "mock-dictionary-v1"

    @property
    def is_ready(self) -> bool:
        """Mock is always ready."""
        return self._ready

    def pair_status(self, source_language: str, target_language: str) -> PairStatus:
        """Report availability from the configured language sets."""
        unsupported = self._config.unsupported_languages
        if source_language in unsupported or target_language in unsupported:
            return PairStatus.UNSUPPORTED

        installed = self._config.installed_languages
        if installed is None:
            return PairStatus.INSTALLED
        if source_language in installed and target_language in installed:
            return PairStatus.INSTALLED
        return PairStatus.SUPPORTED

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Return a deterministic translation.

        Raises:
            RuntimeError: If the pair is not installed or the target is configured to fail
        """
        with self._lock:
            self.calls.append((text, source_language, target_language))

        latency_ms = self._config.latency_by_language.get(
            target_language, self._config.simulate_latency_ms
        )
        if latency_ms > 0:
            time.sleep(latency_ms / 1000.0)

        if self.pair_status(source_language, target_language) != PairStatus.INSTALLED:
            raise RuntimeError(
                f"Language pair not installed: {source_language} -> {target_language}"
            )

        if target_language in self._config.failing_languages:
            raise ConnectionError(f"Mock failure translating to {target_language}")

        canned = self._config.dictionary.get((text, target_language))
        if canned is not None:
            return canned
        return f"[{target_language}] {text}"

    def shutdown(self) -> None:
        """Mark the mock as no longer ready."""
        self._ready = False
