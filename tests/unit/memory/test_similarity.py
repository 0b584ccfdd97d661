"""
Tests for translation memory string similarity.
"""

import pytest

from lingua_engine.memory import edit_distance, similarity


class TestEditDistance:
    """Tests for edit_distance."""

    def test_kitten_sitting(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_identical(self):
        assert edit_distance("flaw", "flaw") == 0

    def test_empty(self):
        assert edit_distance("", "abc") == 3


class TestSimilarity:
    """Tests for similarity rules."""

    def test_exact_match_after_normalization(self):
        """Test case and surrounding whitespace are ignored."""
        assert similarity("Hello", "  hello ") == 1.0

    def test_containment_penalty(self):
        """Test 'hello' in 'hello world' scores 5/11 * 0.95."""
        assert similarity("hello", "hello world") == pytest.approx(5 / 11 * 0.95)
        assert similarity("hello", "hello world") == pytest.approx(0.4318, abs=1e-4)

    def test_containment_is_symmetric(self):
        assert similarity("hello world", "hello") == similarity("hello", "hello world")

    def test_edit_distance_similarity(self):
        """Test kitten/sitting scores 1 - 3/7."""
        assert similarity("kitten", "sitting") == pytest.approx(0.5714, abs=1e-4)

    def test_no_common_characters(self):
        """Test equal-length strings with nothing in common score 0."""
        assert similarity("abc", "xyz") == 0.0

    def test_within_unit_interval(self):
        assert 0.0 <= similarity("a", "completely different") <= 1.0
