"""
Tests for transliterator adapters.
"""

import pytest

from lingua_engine.romanization import Romanizer, Transliterator, create_transliterator
from lingua_engine.romanization.mock import MockTransliterator, MockTransliteratorConfig


class TestMockTransliterator:
    """Tests for MockTransliterator."""

    def test_unknown_input_passes_through(self):
        assert MockTransliterator().transform("текст", "Cyrillic-Latin") == "текст"

    def test_failing_system_raises(self):
        transliterator = MockTransliterator(MockTransliteratorConfig(failing_systems={"Han-Latin"}))

        with pytest.raises(RuntimeError):
            transliterator.transform("你好", "Han-Latin")

    def test_factory_mock(self):
        transliterator = create_transliterator(mock=True)

        assert isinstance(transliterator, MockTransliterator)
        assert isinstance(transliterator, Transliterator)


class TestIcuTransliterator:
    """Tests for the PyICU adapter."""

    @pytest.fixture
    def icu_romanizer(self):
        pytest.importorskip("icu")
        return Romanizer(create_transliterator())

    def test_cyrillic(self, icu_romanizer):
        assert icu_romanizer.romanize("Москва", "ru").lower().startswith("moskva")

    def test_pinyin_without_tones(self, icu_romanizer):
        from lingua_engine.romanization import RomanizationSystem

        result = icu_romanizer.romanize("你好", "zh-Hans", RomanizationSystem.PINYIN_WITHOUT_TONES)

        assert result == "ni hao"
