"""
History Store Interface Contract.

Durable history storage is owned by the caller; the engine only reads
records and hands over new outcomes.
"""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .models import HistoryRecord

if TYPE_CHECKING:
    from lingua_engine.translation.models import TranslationOutcome


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for the external history store."""

    def recent_records(self) -> Iterable[HistoryRecord]:
        """Return records ordered newest-first."""
        ...

    def save_outcomes(
        self,
        source_text: str,
        source_language: str | None,
        outcomes: Sequence["TranslationOutcome"],
    ) -> HistoryRecord:
        """Persist the outcomes of one input as a single record."""
        ...
