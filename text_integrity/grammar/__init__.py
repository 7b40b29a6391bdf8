"""Pattern-based grammar checking."""

from .rules import DEFAULT_RULES, GrammarRule, build_rules, english_rules, filipino_rules
from .engine import GrammarEngine

__all__ = [
    'DEFAULT_RULES',
    'GrammarRule',
    'build_rules',
    'english_rules',
    'filipino_rules',
    'GrammarEngine',
]
