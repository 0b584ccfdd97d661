"""
Translation memory component.

Exports:
    - TranslationMemoryMatcher: Fuzzy reuse suggestions from history
    - MatchStrategy: Recency-biased or global top-K scanning
    - similarity / edit_distance: String similarity functions
    - HistoryStore: Protocol for the external history store
    - InMemoryHistoryStore: Reference store implementation
    - HistoryRecord / PriorTranslation / MemorySuggestion: Models
"""

from .interface import HistoryStore
from .matcher import MatchStrategy, TranslationMemoryMatcher
from .models import HistoryRecord, MemorySuggestion, PriorTranslation
from .similarity import edit_distance, similarity
from .store import InMemoryHistoryStore

__all__ = [
    "TranslationMemoryMatcher",
    "MatchStrategy",
    "HistoryStore",
    "InMemoryHistoryStore",
    "HistoryRecord",
    "PriorTranslation",
    "MemorySuggestion",
    "edit_distance",
    "similarity",
]
