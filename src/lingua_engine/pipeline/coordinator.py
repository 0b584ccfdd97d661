"""
Pipeline coordinator.

Runs one generation of the translation pipeline:
detect -> resolve source -> reassign priority -> filter installed targets
-> fan-out -> terminal failure check.

Terminal conditions are raised as TranslationEngineError subclasses.
Per-language failures stay inside the FanOutResult.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable

from pydantic import BaseModel, Field

from lingua_engine.detection import (
    DetectionHypothesis,
    LanguageDetector,
    SourceResolution,
    reassign_priority,
    resolve_source,
)
from lingua_engine.observability import get_logger
from lingua_engine.translation import (
    DetectionFailedError,
    EmptyInputError,
    FanOutResult,
    FanOutTranslator,
    InvalidConfigurationError,
    MissingLanguagePacksError,
    PairStatus,
    TranslationRequest,
)
from lingua_engine.translation.fanout import OutcomeCallback

DetectedCallback = Callable[
    [list[DetectionHypothesis], SourceResolution, str | None], Awaitable[None] | None
]


class PipelineRun(BaseModel):
    """Result of one completed pipeline generation."""

    generation: int = Field(..., ge=0, description="Generation token of the run")
    hypotheses: list[DetectionHypothesis] = Field(
        default_factory=list, description="Ranked detection hypotheses"
    )
    source: SourceResolution = Field(..., description="Resolved source language")
    priority_language: str | None = Field(
        default=None, description="Priority target after reassignment"
    )
    available_targets: list[str] = Field(
        default_factory=list, description="Targets whose pair was installed"
    )
    result: FanOutResult = Field(..., description="Fan-out result")


class PipelineCoordinator:
    """Wires detector, resolver and fan-out translator into one run."""

    def __init__(
        self,
        detector: LanguageDetector,
        fanout: FanOutTranslator,
        max_hypotheses: int = 5,
        include_romanization: bool = True,
    ):
        self._detector = detector
        self._fanout = fanout
        self.max_hypotheses = max_hypotheses
        self.include_romanization = include_romanization
        self.logger = get_logger(__name__)

    async def run(
        self,
        request: TranslationRequest,
        preferred_languages: Iterable[str] | None = None,
        installed_languages: Iterable[str] | None = None,
        on_detected: DetectedCallback | None = None,
        on_result: OutcomeCallback | None = None,
    ) -> PipelineRun:
        """Execute one pipeline run.

        Args:
            request: Text, selected targets, manual source and priority
            preferred_languages: Languages boosted during detection (defaults to targets)
            installed_languages: Languages available on this device
            on_detected: Called once the source is resolved
            on_result: Streaming callback for each successful outcome

        Returns:
            PipelineRun with hypotheses, resolved source and fan-out result

        Raises:
            EmptyInputError: Blank text
            InvalidConfigurationError: No target languages selected
            DetectionFailedError: No manual source and no usable hypothesis
            MissingLanguagePacksError: No target could be translated
        """
        log = self.logger.bind(generation=request.generation)

        if not request.text.strip():
            raise EmptyInputError()
        if not request.targets:
            log.error("pipeline_no_targets")
            raise InvalidConfigurationError()

        preferred = list(preferred_languages) if preferred_languages is not None else request.targets
        installed = list(installed_languages) if installed_languages is not None else None

        hypotheses = await asyncio.to_thread(
            self._detector.detect,
            request.text,
            preferred,
            installed,
            self.max_hypotheses,
        )

        try:
            source = resolve_source(hypotheses, request.targets, request.manual_source)
        except DetectionFailedError:
            log.error("pipeline_detection_failed", text_length=len(request.text))
            raise

        priority = reassign_priority(
            source.language, request.priority_language, request.targets, installed
        )
        if priority != request.priority_language:
            log.info(
                "priority_reassigned",
                previous=request.priority_language,
                priority_language=priority,
            )

        if on_detected is not None:
            notified = on_detected(hypotheses, source, priority)
            if inspect.isawaitable(notified):
                await notified

        scoped = request.without_source(source.language)
        targets = scoped.targets
        if priority is not None and priority not in targets:
            priority = None

        available: list[str] = []
        for target in targets:
            status = await self._fanout.pair_status(source.language, target)
            if status == PairStatus.INSTALLED:
                available.append(target)
            else:
                log.warning(
                    "target_unavailable",
                    source_language=source.language,
                    target_language=target,
                    status=status.value,
                )

        if targets and not available:
            # Reported against the whole selection, source included
            log.error("pipeline_missing_language_packs", languages=request.targets)
            raise MissingLanguagePacksError(request.targets)

        log.info(
            "pipeline_dispatching",
            source_language=source.language,
            manual=source.manual,
            targets=available,
            priority_language=priority,
        )

        result = await self._fanout.translate_all(
            request.text,
            source.language,
            available,
            priority_language=priority,
            include_romanization=self.include_romanization,
            detection_confidence=source.confidence,
            on_result=on_result,
        )

        if result.all_failed:
            raise MissingLanguagePacksError(result.attempted)

        return PipelineRun(
            generation=request.generation,
            hypotheses=hypotheses,
            source=source,
            priority_language=result.priority_language or priority,
            available_targets=available,
            result=result,
        )
