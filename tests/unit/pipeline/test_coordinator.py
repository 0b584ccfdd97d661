"""
Tests for the PipelineCoordinator.
"""

import pytest

from lingua_engine.pipeline import PipelineCoordinator
from lingua_engine.translation import (
    DetectionFailedError,
    EmptyInputError,
    FanOutTranslator,
    InvalidConfigurationError,
    MissingLanguagePacksError,
    TranslationRequest,
)
from lingua_engine.translation.mock import MockTranslator, MockTranslatorConfig


@pytest.fixture
def coordinator(detector, fanout) -> PipelineCoordinator:
    return PipelineCoordinator(detector, fanout)


def _request(text: str, targets: list[str], **kwargs) -> TranslationRequest:
    return TranslationRequest(generation=1, text=text, targets=targets, **kwargs)


class TestPreflight:
    """Tests for terminal conditions raised before translation."""

    @pytest.mark.asyncio
    async def test_blank_text(self, coordinator):
        with pytest.raises(EmptyInputError):
            await coordinator.run(_request("  ", ["en"]))

    @pytest.mark.asyncio
    async def test_no_targets(self, coordinator):
        with pytest.raises(InvalidConfigurationError):
            await coordinator.run(_request("Bonjour", []))

    @pytest.mark.asyncio
    async def test_detection_failure(self, coordinator):
        """Test unrecognized text without a manual source fails detection."""
        with pytest.raises(DetectionFailedError):
            await coordinator.run(_request("zzzz", ["en", "fr"]))

    @pytest.mark.asyncio
    async def test_manual_source_bypasses_detection_failure(self, coordinator):
        run = await coordinator.run(_request("zzzz", ["en", "fr"], manual_source="fr"))

        assert run.source.language == "fr"
        assert run.source.manual is True
        assert run.result.succeeded == ["en"]

    @pytest.mark.asyncio
    async def test_only_uninstalled_target(self, coordinator):
        """Test a lone uninstalled target reports every selected language."""
        with pytest.raises(MissingLanguagePacksError) as exc_info:
            await coordinator.run(_request("Bonjour", ["fr", "ja"]))

        assert exc_info.value.languages == ["fr", "ja"]
        assert "French" in str(exc_info.value)
        assert "Japanese" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_all_attempts_failed(self, detector):
        translator = MockTranslator(MockTranslatorConfig(failing_languages={"en", "es"}))
        coordinator = PipelineCoordinator(detector, FanOutTranslator(translator))

        with pytest.raises(MissingLanguagePacksError) as exc_info:
            await coordinator.run(_request("Bonjour", ["fr", "en", "es"]))

        assert sorted(exc_info.value.languages) == ["en", "es"]


class TestBonjourScenario:
    """French text with English, Spanish and Japanese selected."""

    @pytest.mark.asyncio
    async def test_full_run(self, coordinator):
        streamed: list[str] = []
        detected: list[str] = []

        run = await coordinator.run(
            _request("Bonjour", ["fr", "en", "es", "ja"], priority_language="en"),
            preferred_languages={"fr", "en"},
            installed_languages={"fr", "en", "es"},
            on_detected=lambda hypotheses, source, priority: detected.append(source.language),
            on_result=lambda outcome: streamed.append(outcome.target_language),
        )

        assert detected == ["fr"]
        assert run.hypotheses[0].language == "fr"
        assert run.source.language == "fr"
        assert run.source.confidence == pytest.approx(0.8)
        assert streamed[0] == "en"
        assert sorted(streamed) == ["en", "es"]
        assert run.available_targets == ["en", "es"]
        assert run.result.succeeded == ["en", "es"]
        assert all(o.detection_confidence == pytest.approx(0.8) for o in run.result.outcomes)

    @pytest.mark.asyncio
    async def test_priority_reassigned_off_source(self, coordinator):
        """Test a priority equal to the source moves to the first remaining language."""
        detected_priority: list[str | None] = []

        run = await coordinator.run(
            _request("Bonjour", ["fr", "es", "en"], priority_language="fr"),
            on_detected=lambda hypotheses, source, priority: detected_priority.append(priority),
        )

        assert detected_priority == ["en"]
        assert run.priority_language == "en"

    @pytest.mark.asyncio
    async def test_source_only_selection(self, coordinator):
        run = await coordinator.run(_request("Bonjour", ["fr"]))

        assert run.result.outcomes == []
        assert run.result.all_failed is False
