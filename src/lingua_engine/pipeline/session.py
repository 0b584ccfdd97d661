"""
Input session.

The caller-facing object of the engine. Feeds text edits through the
debounced scheduler into the pipeline coordinator and keeps the observable
state of the active generation: hypotheses, resolved source, streamed
outcomes, loading languages and the terminal error, if any.

Results and errors of superseded generations are dropped.
"""

import asyncio
import inspect
import uuid
from collections.abc import Awaitable, Callable, Iterable

from lingua_engine.config import EngineConfig, get_config
from lingua_engine.detection import DetectionHypothesis, SourceResolution
from lingua_engine.memory import HistoryStore, MemorySuggestion, TranslationMemoryMatcher
from lingua_engine.observability import bind_session_context, get_logger
from lingua_engine.translation import (
    TranslationError,
    TranslationOutcome,
    TranslationRequest,
)
from lingua_engine.translation.errors import TranslationEngineError, create_translation_error

from .coordinator import PipelineCoordinator
from .result_buffer import ResultBuffer
from .scheduler import DebouncedScheduler

ResultListener = Callable[[TranslationOutcome], Awaitable[None] | None]
ErrorListener = Callable[[TranslationError], Awaitable[None] | None]


async def _notify(listener: Callable | None, value: object) -> None:
    if listener is None:
        return
    result = listener(value)
    if inspect.isawaitable(result):
        await result


class TranslationSession:
    """Debounced, generation-scoped translation of one text input.

    Example:
        >>> session = TranslationSession(coordinator, selected_languages=["en", "es"])
        >>> session.on_text_changed("Bonjour")
        >>> await session.wait()
        >>> [o.target_language for o in session.outcomes]
        ['en', 'es']
    """

    def __init__(
        self,
        coordinator: PipelineCoordinator,
        selected_languages: Iterable[str] = (),
        installed_languages: Iterable[str] | None = None,
        preferred_languages: Iterable[str] | None = None,
        priority_language: str | None = None,
        manual_source: str | None = None,
        matcher: TranslationMemoryMatcher | None = None,
        store: HistoryStore | None = None,
        config: EngineConfig | None = None,
        session_id: str | None = None,
        on_result: ResultListener | None = None,
        on_error: ErrorListener | None = None,
    ):
        """Initialize session.

        Args:
            coordinator: Pipeline coordinator executing each run
            selected_languages: Languages the user translates between
            installed_languages: Languages available on this device (None = all)
            preferred_languages: Languages boosted during detection (defaults to selected)
            priority_language: Target delivered first
            manual_source: Source language override
            matcher: Translation memory matcher for suggestions()
            store: History store receiving auto-saved outcomes
            config: Engine configuration (defaults to the global config)
            session_id: Identifier bound to every log entry
            on_result: Listener for streamed outcomes of the active generation
            on_error: Listener for terminal errors of the active generation
        """
        config = config or get_config()

        self._coordinator = coordinator
        self.selected_languages = list(dict.fromkeys(selected_languages))
        self.installed_languages = (
            list(installed_languages) if installed_languages is not None else None
        )
        self.preferred_languages = (
            list(preferred_languages) if preferred_languages is not None else None
        )
        self.manual_source = manual_source
        self._matcher = matcher
        self._store = store
        self.auto_save = config.scheduler.auto_save
        self.on_result = on_result
        self.on_error = on_error

        self.session_id = session_id or str(uuid.uuid4())
        self.logger = bind_session_context(get_logger(__name__), self.session_id)

        self._scheduler = DebouncedScheduler(self._run, delay_ms=config.scheduler.debounce_ms)
        self._buffer = ResultBuffer()

        self._text = ""
        self._hypotheses: list[DetectionHypothesis] = []
        self._source: SourceResolution | None = None
        self._source_romanization: str | None = None
        self._priority_language = priority_language
        self._is_translating = False
        self._error: TranslationError | None = None

    # -------------------------------------------------------------------------
    # Observable state
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def generation(self) -> int:
        return self._scheduler.generation

    @property
    def outcomes(self) -> list[TranslationOutcome]:
        """Outcomes of the active generation, sorted by display name."""
        return self._buffer.sorted()

    @property
    def hypotheses(self) -> list[DetectionHypothesis]:
        return list(self._hypotheses)

    @property
    def source_language(self) -> str | None:
        return self._source.language if self._source else None

    @property
    def source_confidence(self) -> float:
        return self._source.confidence if self._source else 0.0

    @property
    def source_romanization(self) -> str | None:
        return self._source_romanization

    @property
    def loading_languages(self) -> set[str]:
        return self._buffer.loading_languages

    @property
    def is_translating(self) -> bool:
        return self._is_translating

    @property
    def error(self) -> TranslationError | None:
        return self._error

    @property
    def priority_language(self) -> str | None:
        return self._priority_language

    @priority_language.setter
    def priority_language(self, language: str | None) -> None:
        self._priority_language = language

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def on_text_changed(self, text: str) -> int | None:
        """Handle an edit of the input text.

        Blank text cancels pending work and clears all state without
        scheduling a run.

        Returns:
            Generation token of the scheduled run, or None for blank text
        """
        self._text = text
        if not text.strip():
            self._scheduler.cancel()
            self._reset_state()
            self.logger.debug("input_cleared", generation=self._scheduler.generation)
            return None
        return self._scheduler.submit(text)

    def retry(self) -> int | None:
        """Rerun the pipeline for the current text immediately."""
        if not self._text.strip():
            return None
        self.logger.info("pipeline_retry", previous_error=self._error.error_type if self._error else None)
        return self._scheduler.run_now(self._text)

    def cancel(self) -> None:
        """Cancel pending and running work. Current state is kept."""
        self._scheduler.cancel()
        self._is_translating = False

    async def wait(self) -> None:
        """Wait for the scheduled run of the current generation to finish."""
        await self._scheduler.wait()

    def suggestions(self, text: str | None = None) -> list[MemorySuggestion]:
        """Translation memory suggestions for `text` (defaults to the current text)."""
        if self._matcher is None:
            return []
        return self._matcher.find_similar(self._text if text is None else text)

    # -------------------------------------------------------------------------
    # Pipeline run
    # -------------------------------------------------------------------------

    def _reset_state(self) -> None:
        self._buffer.clear()
        self._hypotheses = []
        self._source = None
        self._source_romanization = None
        self._is_translating = False
        self._error = None

    async def _run(self, generation: int, text: str) -> None:
        log = bind_session_context(get_logger(__name__), self.session_id, generation)

        # The new generation takes over the buffer before any work is issued
        self._reset_state()
        self._buffer.begin(generation, loading=self.selected_languages)
        self._is_translating = True

        request = TranslationRequest(
            generation=generation,
            text=text,
            manual_source=self.manual_source,
            targets=self.selected_languages,
            priority_language=self._priority_language,
        )
        log.info("pipeline_started", targets=request.targets, manual_source=request.manual_source)

        async def on_detected(
            hypotheses: list[DetectionHypothesis],
            source: SourceResolution,
            priority: str | None,
        ) -> None:
            if not self._scheduler.is_current(generation):
                return
            self._hypotheses = hypotheses
            self._source = source
            self._priority_language = priority
            self._buffer.set_loading(
                generation, [lang for lang in self.selected_languages if lang != source.language]
            )

        async def on_result(outcome: TranslationOutcome) -> None:
            if not self._scheduler.is_current(generation):
                log.debug("stale_outcome_dropped", target_language=outcome.target_language)
                return
            if self._buffer.add(generation, outcome):
                if outcome.source_romanization is not None:
                    self._source_romanization = outcome.source_romanization
                await _notify(self.on_result, outcome)

        try:
            run = await self._coordinator.run(
                request,
                preferred_languages=self.preferred_languages,
                installed_languages=self.installed_languages,
                on_detected=on_detected,
                on_result=on_result,
            )
        except TranslationEngineError as e:
            if self._scheduler.is_current(generation):
                log.error("pipeline_failed", error_type=e.error_type.value, error=str(e))
                await self._fail(e)
            return
        except asyncio.CancelledError:
            log.debug("pipeline_cancelled")
            raise
        except Exception as e:
            if self._scheduler.is_current(generation):
                log.exception("pipeline_crashed", error=str(e))
                await self._fail(e)
            return
        finally:
            if self._scheduler.is_current(generation):
                self._is_translating = False
                self._buffer.finish_loading(generation)

        if not self._scheduler.is_current(generation):
            return

        log.info(
            "pipeline_completed",
            source_language=run.source.language,
            outcomes=len(self._buffer),
            failures=len(run.result.failures),
        )

        if self.auto_save and self._store is not None and len(self._buffer) > 0:
            record = await asyncio.to_thread(
                self._store.save_outcomes, text, run.source.language, self._buffer.sorted()
            )
            log.info("history_saved", record_id=record.id, translations=len(record.translations))

    async def _fail(self, exception: Exception) -> None:
        if isinstance(exception, TranslationEngineError):
            self._error = exception.to_record()
        else:
            self._error = create_translation_error(exception)
        await _notify(self.on_error, self._error)
