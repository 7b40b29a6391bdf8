"""
Tests for engine wiring and the package-level API.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import text_integrity
from text_integrity.config import IntegrityConfig
from text_integrity.engine import TextIntegrityEngine, get_default_engine
from text_integrity.error_handler import ConfigError, DictionaryError
from text_integrity.models import AnalysisReport, AutoCorrectResult, ScanResult


@pytest.fixture(scope="module")
def engine():
    return TextIntegrityEngine()


# ---------------------------------------------------------------------------
# Construction from settings
# ---------------------------------------------------------------------------

class TestFromConfig:
    def test_defaults(self):
        engine = TextIntegrityEngine.from_config()
        assert engine.scan_profanity("gago ka").has_profanity

    def test_from_yaml_path(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('profanity:\n  mask_char: "#"\n', encoding="utf-8")

        engine = TextIntegrityEngine.from_config(str(path))

        assert engine.censor("fuck") == "####"

    def test_custom_roots(self, tmp_path):
        roots = tmp_path / "roots.txt"
        roots.write_text("english:frak\n", encoding="utf-8")
        config = IntegrityConfig()
        config.profanity.custom_roots_path = str(roots)

        engine = TextIntegrityEngine.from_config(config)
        result = engine.scan_profanity("frak this")

        assert result.has_profanity
        assert result.matches == ["frak"]
        assert result.language == "english"

    def test_custom_whitelist(self, tmp_path):
        whitelist = tmp_path / "whitelist.txt"
        whitelist.write_text("bobo\n", encoding="utf-8")
        config = IntegrityConfig()
        config.profanity.custom_whitelist_path = str(whitelist)

        engine = TextIntegrityEngine.from_config(config)

        assert not engine.scan_profanity("bobo").has_profanity
        assert engine.scan_profanity("gago").has_profanity

    def test_reserved_mask_char(self):
        config = IntegrityConfig()
        config.profanity.mask_char = "@"
        with pytest.raises(ConfigError):
            TextIntegrityEngine.from_config(config)

    def test_bad_roots_file(self, tmp_path):
        roots = tmp_path / "roots.txt"
        roots.write_text("klingon:qapla\n", encoding="utf-8")
        config = IntegrityConfig()
        config.profanity.custom_roots_path = str(roots)
        with pytest.raises(DictionaryError):
            TextIntegrityEngine.from_config(config)

    def test_filipino_rules_disabled(self):
        config = IntegrityConfig()
        config.grammar.filipino_rules = False
        engine = TextIntegrityEngine.from_config(config)

        issues = engine.check_grammar("Mga mga bata.")

        assert all(i.language is None for i in issues)

    def test_partial_weights_merge_with_defaults(self):
        config = IntegrityConfig()
        config.scoring.weights = {"error": 1}
        engine = TextIntegrityEngine.from_config(config)

        assert engine.aggregator.weights == {"error": 1, "warning": 2, "suggestion": 1}
        assert engine.check_text("", "Teh.").quality_score == 95


# ---------------------------------------------------------------------------
# Engine operations
# ---------------------------------------------------------------------------

class TestEngineOperations:
    def test_warm_up(self, engine):
        count = engine.warm_up()
        assert count == len({r.word for r in engine.scanner.roots})

    def test_result_types(self, engine):
        assert isinstance(engine.scan_profanity("hello"), ScanResult)
        assert isinstance(engine.check_text("", "hello"), AnalysisReport)
        assert isinstance(engine.auto_correct("hello"), AutoCorrectResult)

    def test_severity(self, engine):
        assert engine.severity("Good morning everyone.") == "none"
        assert engine.severity("fuck") == "mild"

    def test_concurrent_use(self, engine):
        texts = ["gago ka, fuck", "Good morning everyone.", "teh dog should of gone"] * 20

        def work(text):
            return (
                engine.scan_profanity(text).matches,
                engine.check_text("", text).quality_score,
                engine.auto_correct(text).corrected,
            )

        expected = [work(t) for t in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, texts))

        assert results == expected


# ---------------------------------------------------------------------------
# Package-level functions
# ---------------------------------------------------------------------------

class TestPublicApi:
    def test_default_engine_is_shared(self):
        assert get_default_engine() is get_default_engine()

    def test_default_engine_concurrent_creation(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            engines = list(pool.map(lambda _: get_default_engine(), range(16)))
        assert all(e is engines[0] for e in engines)

    def test_scan_profanity(self):
        result = text_integrity.scan_profanity("gago ka, fuck")
        assert result.has_profanity
        assert result.language == "mixed"

    def test_fast_check(self):
        assert text_integrity.fast_check_profanity("fuck")
        assert not text_integrity.fast_check_profanity("Good morning everyone.")

    def test_censor(self):
        assert text_integrity.censor("fuck") == "****"

    def test_severity(self):
        assert text_integrity.severity("") == "none"

    def test_check_spelling(self):
        assert text_integrity.check_spelling("teh")[0].suggestion == "the"

    def test_check_grammar(self):
        issues = text_integrity.check_grammar("the the cat")
        assert any(i.word == "the the" for i in issues)

    def test_calculate_readability(self):
        assert text_integrity.calculate_readability("").score == 100.0

    def test_check_text(self):
        report = text_integrity.check_text("", "Teh.")
        assert report.quality_score == 85

    def test_auto_correct(self):
        result = text_integrity.auto_correct("teh dog should of gone")
        assert result.corrected == "the dog should have gone"

    @pytest.mark.parametrize("value", [None, 42, ["fuck"]])
    def test_non_string_input(self, value):
        assert not text_integrity.scan_profanity(value).has_profanity
        assert text_integrity.censor(value) == ""
        assert text_integrity.check_spelling(value) == []
        assert text_integrity.check_text(value, value).quality_score == 100
