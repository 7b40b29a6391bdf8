"""
Tests for text_integrity/profanity/whitelist.py

Tests the default safe words and phrases, containment matching, phrase
spans and loading custom whitelist files.
"""

from text_integrity.lookup import WordSet
from text_integrity.profanity.whitelist import (
    DEFAULT,
    DEFAULT_PHRASES,
    DEFAULT_WHITELIST,
    Whitelist,
    load_whitelist,
)
from text_integrity.profanity.wordlist import DEFAULT_ROOTS


# ---------------------------------------------------------------------------
# DEFAULT_WHITELIST basics
# ---------------------------------------------------------------------------

class TestDefaultWhitelist:
    def test_is_a_word_set(self):
        assert isinstance(DEFAULT_WHITELIST, WordSet)

    def test_is_non_empty(self):
        assert len(DEFAULT_WHITELIST) > 0

    def test_all_lowercase(self):
        for word in DEFAULT_WHITELIST:
            assert word == word.lower(), f"Whitelist entry '{word}' is not lowercase"

    def test_known_safe_words_present(self):
        expected = ["class", "classic", "cockpit", "title", "assassin", "scunthorpe"]
        for word in expected:
            assert word in DEFAULT_WHITELIST, f"'{word}' missing from whitelist"

    def test_no_entry_is_inside_a_root(self):
        """A safe word inside a root would whitelist the root itself."""
        for root in DEFAULT_ROOTS:
            for safe in DEFAULT_WHITELIST:
                assert safe not in root.word, f"'{safe}' is part of root '{root.word}'"

    def test_no_root_is_whitelisted(self):
        for root in DEFAULT_ROOTS:
            assert not DEFAULT.is_whitelisted(root.word), f"Root '{root.word}' is whitelisted"

    def test_phrases_have_several_words(self):
        for phrase in DEFAULT_PHRASES:
            assert len(phrase.split()) > 1


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

class TestIsWhitelisted:
    def test_exact(self):
        assert DEFAULT.is_whitelisted("cockpit")

    def test_case_insensitive(self):
        assert DEFAULT.is_whitelisted("CockPit")

    def test_containment(self):
        assert DEFAULT.is_whitelisted("classic!")
        assert DEFAULT.is_whitelisted("reclassification")

    def test_not_whitelisted(self):
        assert not DEFAULT.is_whitelisted("fuck")

    def test_empty(self):
        assert not DEFAULT.is_whitelisted("")
        assert not DEFAULT.is_whitelisted("   ")

    def test_contains(self):
        assert "title" in DEFAULT
        assert "TITLE " in DEFAULT
        assert 5 not in DEFAULT


class TestPhraseSpans:
    def test_finds_phrase(self):
        assert DEFAULT.phrase_spans("I love leche flan") == [(7, 17)]

    def test_whitespace_between_words_may_vary(self):
        assert DEFAULT.phrase_spans("Leche   Flan") == [(0, 12)]

    def test_phrase_must_stand_alone(self):
        assert DEFAULT.phrase_spans("leche flans") == []

    def test_no_phrase(self):
        assert DEFAULT.phrase_spans("leche") == []


class TestExtended:
    def test_adds_entries(self):
        extended = DEFAULT.extended(["gago"], ["walang hiya"])
        assert extended.is_whitelisted("gago")
        assert extended.phrase_spans("walang hiya") == [(0, 11)]

    def test_original_unchanged(self):
        DEFAULT.extended(["gago"])
        assert not DEFAULT.is_whitelisted("gago")

    def test_len(self):
        assert len(Whitelist(["a", "b"], ["c d"])) == 3


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

class TestLoadWhitelist:
    def test_no_path_returns_default(self):
        assert load_whitelist("") is DEFAULT

    def test_missing_file_returns_default(self, tmp_path):
        assert load_whitelist(str(tmp_path / "missing.txt")) is DEFAULT

    def test_merges_words_and_phrases(self, tmp_path):
        path = tmp_path / "safe.txt"
        path.write_text("# campus names\nBobo\n\nputa  de  gallo\n", encoding="utf-8")

        whitelist = load_whitelist(str(path))

        assert whitelist.is_whitelisted("bobo")
        assert "puta de gallo" in whitelist.phrases
        assert whitelist.is_whitelisted("cockpit")
