"""
Unit tests for the read-only word set and correction map.
"""

import pytest

from text_integrity.lookup import CorrectionMap, WordSet


class TestWordSet:
    def test_lowercases_and_dedupes(self):
        words = WordSet(["Hello", "hello", "World"])
        assert list(words) == ["hello", "world"]
        assert len(words) == 2

    def test_contains(self):
        words = WordSet(["hello"])
        assert "hello" in words
        assert "Hello" not in words
        assert 42 not in words

    def test_empty(self):
        assert len(WordSet()) == 0


class TestCorrectionMap:
    def test_mapping(self):
        corrections = CorrectionMap([("Teh", "the"), ("adn", "and")])
        assert corrections["teh"] == "the"
        assert list(corrections) == ["teh", "adn"]
        assert len(corrections) == 2
        assert dict(corrections) == {"teh": "the", "adn": "and"}

    def test_lookup_is_case_insensitive(self):
        corrections = CorrectionMap([("teh", "the")])
        assert corrections.lookup("TEH") == "the"
        assert corrections.lookup("the") is None

    def test_later_duplicate_wins(self):
        corrections = CorrectionMap([("teh", "tea"), ("teh", "the")])
        assert corrections["teh"] == "the"

    def test_read_only(self):
        corrections = CorrectionMap([("teh", "the")])
        with pytest.raises(TypeError):
            corrections["teh"] = "tea"
