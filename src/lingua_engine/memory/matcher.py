"""
Translation Memory Matcher.

Approximate search over historical records, newest-first.
"""

from collections.abc import Iterable
from enum import Enum

from lingua_engine.observability import get_logger

from .interface import HistoryStore
from .models import HistoryRecord, MemorySuggestion
from .similarity import similarity

DEFAULT_SIMILARITY_THRESHOLD = 0.7
DEFAULT_MAX_SUGGESTIONS = 5


class MatchStrategy(str, Enum):
    """How the matcher bounds its scan."""

    # Stop once max_suggestions qualify: recency-biased, not a global top-K
    RECENCY = "recency"
    # Score every record and keep the best max_suggestions
    TOP_K = "top_k"


class TranslationMemoryMatcher:
    """Finds prior translations whose source text resembles the query."""

    def __init__(
        self,
        store: HistoryStore | None = None,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        strategy: MatchStrategy = MatchStrategy.RECENCY,
    ):
        self._store = store
        self.similarity_threshold = similarity_threshold
        self.max_suggestions = max_suggestions
        self.strategy = strategy
        self.logger = get_logger(__name__)

    def find_similar(
        self,
        text: str,
        records: Iterable[HistoryRecord] | None = None,
    ) -> list[MemorySuggestion]:
        """Return suggestions sorted by similarity, highest first.

        Args:
            text: Query text
            records: Records ordered newest-first; defaults to the store's records

        Returns:
            Up to max_suggestions suggestions with similarity >= threshold
        """
        if not text.strip():
            return []

        if records is None:
            if self._store is None:
                return []
            records = self._store.recent_records()

        suggestions: list[MemorySuggestion] = []
        scanned = 0
        for record in records:
            scanned += 1
            score = similarity(text, record.source_text)

            if score >= self.similarity_threshold:
                suggestions.append(
                    MemorySuggestion(
                        source_text=record.source_text,
                        translations=list(record.translations),
                        similarity=score,
                        last_used=record.timestamp,
                    )
                )

            if self.strategy == MatchStrategy.RECENCY and len(suggestions) >= self.max_suggestions:
                break

        suggestions.sort(key=lambda s: s.similarity, reverse=True)
        suggestions = suggestions[: self.max_suggestions]

        self.logger.debug("memory_matched", scanned=scanned, suggestions=len(suggestions))
        return suggestions
