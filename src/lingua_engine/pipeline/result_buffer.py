"""
Generation-owned result buffer.

Holds the outcomes of exactly one pipeline generation. Beginning a new
generation replaces all state, and writes stamped with any other generation
are rejected, so results of superseded runs never interleave with the
active run.
"""

from collections.abc import Iterable

from lingua_engine.translation.models import TranslationOutcome


class ResultBuffer:
    """Outcomes of the active generation, keyed by target language."""

    def __init__(self) -> None:
        self._generation: int | None = None
        self._outcomes: dict[str, TranslationOutcome] = {}
        self._loading: set[str] = set()

    @property
    def generation(self) -> int | None:
        """Generation that currently owns the buffer."""
        return self._generation

    @property
    def loading_languages(self) -> set[str]:
        """Targets of the active generation still awaiting an outcome."""
        return set(self._loading)

    def begin(self, generation: int, loading: Iterable[str] = ()) -> None:
        """Hand the buffer to a new generation, discarding previous state."""
        self._generation = generation
        self._outcomes = {}
        self._loading = set(loading)

    def owns(self, generation: int) -> bool:
        return self._generation == generation

    def add(self, generation: int, outcome: TranslationOutcome) -> bool:
        """Store an outcome for its target language.

        Returns:
            False when the outcome belongs to a stale generation and was dropped
        """
        if not self.owns(generation):
            return False
        # Upsert: a second outcome for the same target replaces the first
        self._outcomes[outcome.target_language] = outcome
        self._loading.discard(outcome.target_language)
        return True

    def set_loading(self, generation: int, languages: Iterable[str]) -> None:
        if self.owns(generation):
            self._loading = set(languages) - set(self._outcomes)

    def finish_loading(self, generation: int) -> None:
        if self.owns(generation):
            self._loading.clear()

    def snapshot(self) -> list[TranslationOutcome]:
        """Outcomes in arrival order."""
        return list(self._outcomes.values())

    def sorted(self) -> list[TranslationOutcome]:
        """Outcomes sorted by target display name."""
        return sorted(self._outcomes.values(), key=lambda o: (o.language_name, o.target_language))

    def clear(self) -> None:
        """Drop all state and release ownership."""
        self._generation = None
        self._outcomes = {}
        self._loading = set()

    def __len__(self) -> int:
        return len(self._outcomes)
