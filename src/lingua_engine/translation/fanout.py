"""Fan-out Translator.

Translates one source text into every available target language
concurrently, streaming each outcome as it completes.

Delivery order:
- The priority target (when deliverable) is translated and emitted first,
  before any other target is dispatched
- Remaining targets are emitted in completion order
- The returned FanOutResult lists outcomes sorted by display name
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable

from lingua_engine.languages import display_name
from lingua_engine.observability import get_logger
from lingua_engine.romanization import Romanizer, default_system

from .errors import TranslationFailedError
from .interface import Translator
from .models import FanOutResult, PairStatus, TranslationError, TranslationOutcome

OutcomeCallback = Callable[[TranslationOutcome], Awaitable[None] | None]

# Channel item: an outcome or the error of one translation unit
_UnitResult = TranslationOutcome | TranslationFailedError


async def _emit(callback: OutcomeCallback | None, outcome: TranslationOutcome) -> None:
    if callback is None:
        return
    result = callback(outcome)
    if inspect.isawaitable(result):
        await result


class FanOutTranslator:
    """Dispatches one translation unit per target language.

    Units run in worker threads (the Translator contract is synchronous)
    and report into a single queue. The collector draining that queue is the
    only code that appends outcomes or invokes the streaming callback.
    """

    def __init__(self, translator: Translator, romanizer: Romanizer | None = None):
        """Initialize fan-out translator.

        Args:
            translator: External translation capability
            romanizer: Optional romanizer for source/target transliteration
        """
        self._translator = translator
        self._romanizer = romanizer
        self.logger = get_logger(__name__)

    async def pair_status(self, source_language: str, target_language: str) -> PairStatus:
        """Check pair availability without blocking the event loop."""
        return await asyncio.to_thread(self._translator.pair_status, source_language, target_language)

    async def translate_all(
        self,
        text: str,
        source_language: str,
        targets: Iterable[str],
        priority_language: str | None = None,
        include_romanization: bool = True,
        detection_confidence: float = 1.0,
        on_result: OutcomeCallback | None = None,
    ) -> FanOutResult:
        """Translate text into all available targets.

        Args:
            text: Source text
            source_language: Resolved source language
            targets: Target languages (the source is removed if present)
            priority_language: Target to translate and emit first
            include_romanization: Attach source/target romanization
            detection_confidence: Confidence recorded on every outcome
            on_result: Streaming callback invoked once per successful outcome

        Returns:
            FanOutResult with name-sorted outcomes and attempt accounting
        """
        target_list = [t for t in dict.fromkeys(targets) if t != source_language]
        result = FanOutResult(source_language=source_language, attempted=list(target_list))

        if not text.strip() or not target_list:
            self.logger.debug("fanout_nothing_to_do", targets=len(target_list))
            return result

        self.logger.info(
            "fanout_started",
            source_language=source_language,
            targets=target_list,
            priority_language=priority_language,
        )

        source_romanization = None
        if include_romanization and self._romanizer is not None:
            source_romanization = self._romanizer.romanize(text, source_language)

        outcomes: list[TranslationOutcome] = []
        remaining = list(target_list)

        # Priority target: translated and delivered before anything else is dispatched
        if priority_language is not None and priority_language in remaining:
            status = await self.pair_status(source_language, priority_language)
            if status == PairStatus.INSTALLED:
                self.logger.info("fanout_priority_first", language=priority_language)
                unit = await self._run_unit(
                    text,
                    source_language,
                    priority_language,
                    detection_confidence,
                    source_romanization,
                    include_romanization,
                )
                if isinstance(unit, TranslationOutcome):
                    remaining.remove(priority_language)
                    outcomes.append(unit)
                    result.priority_language = priority_language
                    await _emit(on_result, unit)
                else:
                    # Stays in the concurrent group for a second attempt
                    self.logger.warning(
                        "fanout_priority_failed",
                        language=priority_language,
                        error=str(unit),
                    )

        # Remaining targets: every target without an outcome, availability re-checked
        available: list[str] = []
        for target in remaining:
            status = await self.pair_status(source_language, target)
            if status == PairStatus.INSTALLED:
                available.append(target)
            else:
                result.skipped.append(target)
                self.logger.warning(
                    "fanout_pair_unavailable",
                    source_language=source_language,
                    target_language=target,
                    status=status.value,
                )

        if available:
            outcomes.extend(
                await self._dispatch(
                    text,
                    source_language,
                    available,
                    detection_confidence,
                    source_romanization,
                    include_romanization,
                    on_result,
                    result.failures,
                )
            )

        result.outcomes = sorted(outcomes, key=lambda o: (o.language_name, o.target_language))

        self.logger.info(
            "fanout_completed",
            succeeded=len(result.outcomes),
            attempted=len(result.attempted),
            skipped=len(result.skipped),
            failed=len(result.failures),
        )
        if result.all_failed:
            self.logger.error(
                "fanout_no_translations",
                attempted=result.attempted,
                hint="language packs may not be installed",
            )

        return result

    async def _dispatch(
        self,
        text: str,
        source_language: str,
        targets: list[str],
        detection_confidence: float,
        source_romanization: str | None,
        include_romanization: bool,
        on_result: OutcomeCallback | None,
        failures: list[TranslationError],
    ) -> list[TranslationOutcome]:
        """Run one task per target and collect their results in arrival order."""
        channel: asyncio.Queue[_UnitResult] = asyncio.Queue()

        async def worker(target: str) -> None:
            unit = await self._run_unit(
                text,
                source_language,
                target,
                detection_confidence,
                source_romanization,
                include_romanization,
            )
            channel.put_nowait(unit)

        tasks = [asyncio.create_task(worker(target)) for target in targets]
        collected: list[TranslationOutcome] = []

        try:
            for _ in range(len(tasks)):
                unit = await channel.get()
                if isinstance(unit, TranslationOutcome):
                    collected.append(unit)
                    await _emit(on_result, unit)
                else:
                    failures.append(self._record_failure(unit))
        finally:
            # Only reached with pending tasks when the collector itself is cancelled
            for task in tasks:
                if not task.done():
                    task.cancel()

        return collected

    async def _run_unit(
        self,
        text: str,
        source_language: str,
        target_language: str,
        detection_confidence: float,
        source_romanization: str | None,
        include_romanization: bool,
    ) -> _UnitResult:
        """Translate into one target. Never raises: every failure becomes a channel item."""
        try:
            return await self._translate_unit(
                text,
                source_language,
                target_language,
                detection_confidence,
                source_romanization,
                include_romanization,
            )
        except Exception as e:
            return TranslationFailedError(target_language, e)

    async def _translate_unit(
        self,
        text: str,
        source_language: str,
        target_language: str,
        detection_confidence: float,
        source_romanization: str | None,
        include_romanization: bool,
    ) -> TranslationOutcome:
        translated = await asyncio.to_thread(
            self._translator.translate, text, source_language, target_language
        )

        target_romanization = None
        romanization_system = None
        if include_romanization and self._romanizer is not None:
            if self._romanizer.needs_romanization(target_language):
                target_romanization = self._romanizer.romanize(translated, target_language)
                system = default_system(target_language)
                if target_romanization is not None and system is not None:
                    romanization_system = system.value

        outcome = TranslationOutcome(
            target_language=target_language,
            source_language=source_language,
            translated_text=translated,
            detection_confidence=detection_confidence,
            source_romanization=source_romanization,
            target_romanization=target_romanization,
            romanization_system=romanization_system,
        )

        self.logger.debug(
            "translation_unit_succeeded",
            source_language=source_language,
            target_language=target_language,
        )
        return outcome

    def _record_failure(self, error: TranslationFailedError) -> TranslationError:
        self.logger.warning(
            "translation_unit_failed",
            target_language=error.language,
            language_name=display_name(error.language),
            error=str(error),
        )
        return error.to_record()
