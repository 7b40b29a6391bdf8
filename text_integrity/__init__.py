"""
Text Integrity Engine

Profanity detection (Tagalog and English, leetspeak and evasion aware),
spelling and grammar checking, readability and a 0-100 quality score for
short announcement-style text.
"""

from typing import List

from .engine import TextIntegrityEngine, get_default_engine
from .error_handler import ConfigError, DictionaryError, TextIntegrityError
from .models import (
    AnalysisReport,
    AutoCorrectResult,
    Category,
    Change,
    Issue,
    Language,
    Readability,
    ScanResult,
    Severity,
    Summary,
)

__version__ = "1.0.0"


def scan_profanity(text: str) -> ScanResult:
    """Check text for profanity. Non-string input is treated as empty."""
    return get_default_engine().scan_profanity(text)


def fast_check_profanity(text: str) -> bool:
    """True if the text contains at least one profane match."""
    return get_default_engine().fast_check_profanity(text)


def censor(text: str) -> str:
    """Mask profanity with asterisks of equal length."""
    return get_default_engine().censor(text)


def severity(text: str) -> str:
    """'none', 'mild', 'moderate' or 'severe'."""
    return get_default_engine().severity(text)


def check_spelling(text: str) -> List[Issue]:
    return get_default_engine().check_spelling(text)


def check_grammar(text: str) -> List[Issue]:
    return get_default_engine().check_grammar(text)


def calculate_readability(text: str) -> Readability:
    return get_default_engine().calculate_readability(text)


def check_text(title: str, content: str) -> AnalysisReport:
    """Spelling, grammar, readability and profanity for a title/content pair."""
    return get_default_engine().check_text(title, content)


def auto_correct(text: str) -> AutoCorrectResult:
    """Apply the deterministic, idempotent auto-corrections."""
    return get_default_engine().auto_correct(text)


__all__ = [
    '__version__',
    'TextIntegrityEngine',
    'get_default_engine',
    'TextIntegrityError',
    'ConfigError',
    'DictionaryError',
    'AnalysisReport',
    'AutoCorrectResult',
    'Category',
    'Change',
    'Issue',
    'Language',
    'Readability',
    'ScanResult',
    'Severity',
    'Summary',
    'scan_profanity',
    'fast_check_profanity',
    'censor',
    'severity',
    'check_spelling',
    'check_grammar',
    'calculate_readability',
    'check_text',
    'auto_correct',
]
