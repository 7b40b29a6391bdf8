"""
Unit tests for the readability estimate.
"""

import pytest

from text_integrity.models import Readability
from text_integrity.quality.readability import (
    calculate_readability,
    count_syllables,
    readability_level,
)


class TestCountSyllables:
    @pytest.mark.parametrize("word,expected", [
        ("cat", 1),
        ("table", 2),
        ("hello", 2),
        ("jumped", 1),
        ("Hello!", 2),
        ("five", 1),
    ])
    def test_counts(self, word, expected):
        assert count_syllables(word) == expected

    def test_never_zero(self):
        assert count_syllables("1234") == 1
        assert count_syllables("") == 1


class TestReadabilityLevel:
    @pytest.mark.parametrize("score,level", [
        (-20, "Very Difficult"),
        (29.9, "Very Difficult"),
        (30, "Difficult"),
        (50, "Fairly Difficult"),
        (60, "Standard"),
        (70, "Fairly Easy"),
        (80, "Easy"),
        (90, "Very Easy"),
        (100, "Very Easy"),
    ])
    def test_bounds(self, score, level):
        assert readability_level(score) == level


class TestCalculateReadability:
    def test_empty_text(self):
        assert calculate_readability("") == Readability()
        assert calculate_readability(None) == Readability()
        assert calculate_readability("   ").score == 100.0

    def test_simple_text_clamps_to_100(self):
        result = calculate_readability("The cat sat.")
        assert result.score == 100.0
        assert result.level == "Very Easy"
        assert result.sentences == 1
        assert result.words == 3
        assert result.syllables == 3

    def test_average_words_per_sentence(self):
        result = calculate_readability("One two. Three four five six.")
        assert result.sentences == 2
        assert result.words == 6
        assert result.avg_words_per_sentence == 3.0

    def test_hard_text_clamps_to_zero(self):
        result = calculate_readability(
            "Unquestionably, organizational responsibilities necessitate administrative accountability."
        )
        assert result.score == 0.0
        assert result.level == "Very Difficult"

    def test_no_sentence_terminator(self):
        result = calculate_readability("hello world")
        assert result.sentences == 1
        assert result.avg_words_per_sentence == 2.0

    def test_punctuation_only(self):
        result = calculate_readability("...")
        assert result.sentences == 0
        assert result.words == 1
        assert 0.0 <= result.score <= 100.0

    def test_to_dict(self):
        data = calculate_readability("The cat sat.").to_dict()
        assert set(data) == {"score", "level", "sentences", "words", "syllables", "avg_words_per_sentence"}
