"""
In-memory history store.

Reference implementation of the HistoryStore contract, used in tests and
by callers that do not need durability.
"""

import threading
from collections.abc import Sequence
from datetime import datetime

from lingua_engine.translation.models import TranslationOutcome

from .models import HistoryRecord, PriorTranslation


class InMemoryHistoryStore:
    """Keeps history records in process memory, newest-first."""

    def __init__(self, records: Sequence[HistoryRecord] | None = None):
        self._records: list[HistoryRecord] = sorted(
            records or [], key=lambda r: r.timestamp, reverse=True
        )
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def recent_records(self) -> list[HistoryRecord]:
        with self._lock:
            return list(self._records)

    def add(self, record: HistoryRecord) -> None:
        with self._lock:
            self._records.append(record)
            self._records.sort(key=lambda r: r.timestamp, reverse=True)

    def save_outcomes(
        self,
        source_text: str,
        source_language: str | None,
        outcomes: Sequence[TranslationOutcome],
    ) -> HistoryRecord:
        """Group all outcomes of one input into a single record."""
        record = HistoryRecord(
            source_text=source_text,
            source_language=source_language,
            translations=[
                PriorTranslation(
                    target_language=o.target_language,
                    translated_text=o.translated_text,
                    romanization=o.target_romanization,
                )
                for o in outcomes
            ],
            timestamp=datetime.utcnow(),
        )
        self.add(record)
        return record

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
