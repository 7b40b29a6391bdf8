"""
Readability estimate (simplified Flesch Reading Ease).

    score = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word

clamped to 0-100. Syllables are approximated by counting vowel groups.
"""

import re
from typing import List, Tuple

from ..models import Readability
from ..validator import ensure_text

_SENTENCE_END = re.compile(r'[.!?]+')
_SILENT_SUFFIX = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
_VOWEL_GROUP = re.compile(r'[aeiouy]{1,2}')

# (upper bound, label), checked in order
READABILITY_LEVELS: List[Tuple[float, str]] = [
    (30, "Very Difficult"),
    (50, "Difficult"),
    (60, "Fairly Difficult"),
    (70, "Standard"),
    (80, "Fairly Easy"),
    (90, "Easy"),
]


def count_syllables(word: str) -> int:
    """Approximate syllable count; never less than 1."""
    word = re.sub(r'[^a-z]', '', word.lower())
    if len(word) <= 3:
        return 1
    word = _SILENT_SUFFIX.sub('', word)
    word = re.sub(r'^y', '', word)
    return len(_VOWEL_GROUP.findall(word)) or 1


def readability_level(score: float) -> str:
    for bound, label in READABILITY_LEVELS:
        if score < bound:
            return label
    return "Very Easy"


def calculate_readability(text: str) -> Readability:
    """
    Estimate how easy a text is to read.

    Empty text scores 100 ("Very Easy") with zero counts.
    """
    text = ensure_text(text)
    sentences = [s for s in _SENTENCE_END.split(text) if s.strip()]
    words = text.split()
    if not words:
        return Readability()

    syllables = sum(count_syllables(w) for w in words)
    words_per_sentence = len(words) / len(sentences) if sentences else 0.0
    syllables_per_word = syllables / len(words)

    score = 206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)
    return Readability(
        score=max(0.0, min(100.0, score)),
        level=readability_level(score),
        sentences=len(sentences),
        words=len(words),
        syllables=syllables,
        avg_words_per_sentence=round(words_per_sentence, 1),
    )
