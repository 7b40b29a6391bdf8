"""Profanity detection subpackage."""

from .wordlist import (
    BAD_WORD_ROOTS,
    DEFAULT_ROOTS,
    RootWord,
    load_root_words,
)
from .whitelist import DEFAULT_WHITELIST, DEFAULT_PHRASES, Whitelist, load_whitelist
from .substitutions import LEETSPEAK_MAP, REVERSE_LEETSPEAK_MAP, SubstitutionTable
from .compiler import (
    CharClass,
    CompiledPattern,
    Literal,
    PatternCompiler,
    Separator,
    build_steps,
    compile_root,
)
from .detector import (
    ProfanityScanner,
    normalize_token,
    normalize_text,
    collapse_repeated_chars,
    remove_leetspeak,
)
from .severity import SEVERITY_TIERS, classify_severity

__all__ = [
    'BAD_WORD_ROOTS',
    'DEFAULT_ROOTS',
    'RootWord',
    'load_root_words',
    'DEFAULT_WHITELIST',
    'DEFAULT_PHRASES',
    'Whitelist',
    'load_whitelist',
    'LEETSPEAK_MAP',
    'REVERSE_LEETSPEAK_MAP',
    'SubstitutionTable',
    'CharClass',
    'CompiledPattern',
    'Literal',
    'PatternCompiler',
    'Separator',
    'build_steps',
    'compile_root',
    'ProfanityScanner',
    'normalize_token',
    'normalize_text',
    'collapse_repeated_chars',
    'remove_leetspeak',
    'SEVERITY_TIERS',
    'classify_severity',
]
