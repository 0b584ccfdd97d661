"""
Source Resolver.

Turns detection hypotheses plus an optional manual override into one
effective source language, and keeps the priority target off the source.
"""

from collections.abc import Iterable, Sequence

from lingua_engine.languages import sort_by_display_name
from lingua_engine.translation.errors import DetectionFailedError

from .models import DetectionHypothesis, SourceResolution


def resolve_source(
    hypotheses: Sequence[DetectionHypothesis],
    selected_languages: Iterable[str],
    manual_source: str | None = None,
) -> SourceResolution:
    """Resolve the source language.

    Resolution order:
    1. Manual override
    2. Highest-ranked hypothesis that is also a selected language
    3. Highest-ranked hypothesis

    Args:
        hypotheses: Ranked hypotheses, highest confidence first
        selected_languages: The caller's selected languages
        manual_source: Manually chosen source language

    Returns:
        SourceResolution with the effective source

    Raises:
        DetectionFailedError: If there is no override and no hypothesis
    """
    if manual_source:
        return SourceResolution(language=manual_source, confidence=1.0, manual=True)

    selected = set(selected_languages)
    for hypothesis in hypotheses:
        if hypothesis.language in selected:
            return SourceResolution(language=hypothesis.language, confidence=hypothesis.confidence)

    if hypotheses:
        best = hypotheses[0]
        return SourceResolution(language=best.language, confidence=best.confidence)

    raise DetectionFailedError()


def reassign_priority(
    source_language: str,
    priority_language: str | None,
    selected_languages: Iterable[str],
    installed_languages: Iterable[str] | None = None,
) -> str | None:
    """Move the priority focus off the source language.

    If the focused priority language equals the source, focus moves to the
    alphabetically-first (by display name) selected, installed language other
    than the source. Otherwise the priority is returned unchanged.
    """
    if priority_language != source_language:
        return priority_language

    installed = set(installed_languages) if installed_languages is not None else None
    candidates = [
        lang
        for lang in selected_languages
        if lang != source_language and (installed is None or lang in installed)
    ]
    ordered = sort_by_display_name(candidates)
    return ordered[0] if ordered else None
