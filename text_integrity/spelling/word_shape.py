"""
Letter-shape heuristics that flag strings no English or Filipino word
could plausibly have, such as keyboard mashing ("xzqwk") or a stuck key.
"""

import re

_NO_VOWEL = re.compile(r'^[^aeiouy]+$')

_ENGLISH_IMPOSSIBLE = [
    re.compile(r'(.)\1{2,}'),       # triple or more repeated letters
    re.compile(r'[qwx]{2,}'),       # hard consonants in a row
    re.compile(r'[^aeiou]{5,}'),    # 5+ consonants in a row
    re.compile(r'[aeiou]{4,}'),     # 4+ vowels in a row
    re.compile(r'^[^aeiou]{4,}'),   # starts with 4+ consonants
    re.compile(r'[jqxz]{2,}'),      # rare consonants in a row
]

# Filipino doubles vowels ("maaari") and tolerates longer clusters
_FILIPINO_IMPOSSIBLE = [
    re.compile(r'(.)\1{3,}'),
    re.compile(r'[qxz]{2,}'),
    re.compile(r'[^aeiou]{6,}'),
]


def looks_like_english(word: str) -> bool:
    """True unless the word has a letter pattern English does not produce."""
    if not word or len(word) < 2:
        return True
    lower = word.lower()
    if len(lower) > 3 and _NO_VOWEL.search(lower):
        return False
    return not any(p.search(lower) for p in _ENGLISH_IMPOSSIBLE)


def looks_like_filipino(word: str) -> bool:
    """True unless the word has a letter pattern Filipino does not produce."""
    if not word or len(word) < 2:
        return True
    lower = word.lower()
    if len(lower) > 4 and _NO_VOWEL.search(lower):
        return False
    return not any(p.search(lower) for p in _FILIPINO_IMPOSSIBLE)


def is_implausible(word: str) -> bool:
    """A word is implausible when it fits neither language."""
    return not looks_like_english(word) and not looks_like_filipino(word)
