"""
Engine wiring.

A TextIntegrityEngine owns one instance of every analyzer, including the
profanity scanner and its pattern cache. Build one at startup and share
it between threads; the module-level functions in ``text_integrity`` use
a lazily created default engine.
"""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from .config import IntegrityConfig
from .grammar import GrammarEngine, build_rules
from .models import AnalysisReport, AutoCorrectResult, Issue, Readability, ScanResult
from .profanity import PatternCompiler, ProfanityScanner, load_root_words, load_whitelist
from .quality import SEVERITY_WEIGHTS, AutoCorrector, QualityAggregator, calculate_readability
from .spelling import SpellingChecker

logger = logging.getLogger(__name__)


class TextIntegrityEngine:
    """Profanity detection, spelling, grammar and quality checks behind one object."""

    def __init__(
        self,
        scanner: Optional[ProfanityScanner] = None,
        spelling: Optional[SpellingChecker] = None,
        grammar: Optional[GrammarEngine] = None,
        aggregator: Optional[QualityAggregator] = None,
        corrector: Optional[AutoCorrector] = None,
    ):
        self.scanner = scanner or ProfanityScanner()
        self.spelling = spelling or SpellingChecker()
        self.grammar = grammar or GrammarEngine()
        self.aggregator = aggregator or QualityAggregator(self.scanner, self.spelling, self.grammar)
        self.corrector = corrector or AutoCorrector()

    @classmethod
    def from_config(cls, config: Union[IntegrityConfig, Path, str, None] = None) -> "TextIntegrityEngine":
        """
        Build an engine from settings.

        Args:
            config: An IntegrityConfig, a path to a YAML file, or None for defaults

        Raises:
            ConfigError: If the settings are invalid
            DictionaryError: If a custom dictionary file is malformed
        """
        if not isinstance(config, IntegrityConfig):
            config = IntegrityConfig.load(Path(config) if config else None)

        prof = config.profanity
        scanner = ProfanityScanner(
            roots=load_root_words(prof.custom_roots_path),
            whitelist=load_whitelist(prof.custom_whitelist_path),
            compiler=PatternCompiler(max_separator_run=prof.max_separator_run),
            mask_char=prof.mask_char,
        )
        spelling = SpellingChecker(suggestion_distance=config.spelling.suggestion_distance)
        grammar = GrammarEngine(build_rules(
            long_sentence_chars=config.grammar.long_sentence_chars,
            include_filipino=config.grammar.filipino_rules,
        ))
        aggregator = QualityAggregator(
            scanner,
            spelling,
            grammar,
            weights={**SEVERITY_WEIGHTS, **config.scoring.weights},
            penalty_per_point=config.scoring.penalty_per_point,
        )
        return cls(scanner, spelling, grammar, aggregator)

    def warm_up(self) -> int:
        """Precompile every profanity pattern."""
        return self.scanner.warm_up()

    def scan_profanity(self, text: str) -> ScanResult:
        return self.scanner.scan(text)

    def fast_check_profanity(self, text: str) -> bool:
        return self.scanner.fast_check(text)

    def censor(self, text: str) -> str:
        return self.scanner.censor(text)

    def severity(self, text: str) -> str:
        return self.scanner.severity(text)

    def check_spelling(self, text: str) -> List[Issue]:
        return self.spelling.check(text)

    def check_grammar(self, text: str) -> List[Issue]:
        return self.grammar.check(text)

    def calculate_readability(self, text: str) -> Readability:
        return calculate_readability(text)

    def check_text(self, title: str, content: str) -> AnalysisReport:
        return self.aggregator.analyze(title, content)

    def auto_correct(self, text: str) -> AutoCorrectResult:
        return self.corrector.correct(text)


_default_engine: Optional[TextIntegrityEngine] = None
_default_lock = threading.Lock()


def get_default_engine() -> TextIntegrityEngine:
    """Return the shared default engine, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = TextIntegrityEngine()
                logger.debug("Created default text integrity engine")
    return _default_engine
