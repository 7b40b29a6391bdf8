"""
Safe words that contain profanity substrings but should not be flagged.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from ..lookup import WordSet

logger = logging.getLogger(__name__)

# Words that contain (or look like) a flagged root but are safe.
# No entry may be a substring of a root word, otherwise the root itself
# would be whitelisted by the containment check.
DEFAULT_WHITELIST = WordSet([
    # Contains "ass"
    "assassin", "assassinate", "class", "classic", "classroom", "classmate",
    "classification", "pass", "passing", "passed", "password", "passion",
    "passive", "passage", "passenger", "passport", "compass", "embarrass",
    "harass", "grass", "glass", "mass", "massive", "bass", "brass",
    "assess", "assessment", "asset", "assign", "assignment", "assist",
    "assistant", "associate", "association", "assume", "assumption",
    "assure", "assurance", "assembly",

    # Contains "cock"
    "cockpit", "cocktail", "cockroach", "cockatoo", "peacock", "hancock",
    "hitchcock", "shuttlecock",

    # Contains "dick" or a look-alike
    "dickens", "dickinson", "dictate", "dictionary", "dictation",
    "predict", "addict", "verdict", "disc", "disk",

    # Contains "rape"
    "grape", "grapes", "drape", "scrape", "skyscraper", "trapeze",

    # Contains "tit" / "tite" / "titi"
    "title", "titled", "subtitle", "entitle", "petition", "competition",
    "repetition", "constitution", "institution", "titanium", "tita",

    # Contains "puta" or a look-alike ("pute")
    "compute", "computer", "computation", "reputation", "dispute", "impute",

    # Contains "sex" or a look-alike
    "sussex", "essex", "middlesex", "sextant", "unisex", "sax", "saxophone",

    # Other look-alikes
    "scunthorpe", "shiitake", "sheet", "sock", "analysis", "analyst",
    "document",

    # Tagalog look-alikes
    "tenga",  # ear
    "panis",  # spoiled
    "pista",  # fiesta
])

# Multi-word entries: any match inside one of these phrases is safe
DEFAULT_PHRASES = WordSet([
    "leche flan",
    "leche plan",
    "sex education",
    "sex ed",
])


class Whitelist:
    """Whitelist of safe words and phrases."""

    def __init__(self, words: Iterable[str] = (), phrases: Iterable[str] = ()):
        self.words = WordSet(w.strip().lower() for w in words if w.strip())
        self.phrases = WordSet(p.strip().lower() for p in phrases if p.strip())
        self._phrase_patterns = [
            re.compile(r"(?<![^\W_])" + r"\s+".join(map(re.escape, p.split())) + r"(?![^\W_])",
                       re.IGNORECASE)
            for p in self.phrases
        ]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self.words

    def __len__(self) -> int:
        return len(self.words) + len(self.phrases)

    def is_whitelisted(self, candidate: str) -> bool:
        """
        Check whether a candidate word or match is safe.

        A candidate is safe if it equals a whitelist entry or contains one
        (e.g. "classic!" contains "classic").
        """
        if not candidate:
            return False
        lower = candidate.strip().lower()
        if not lower:
            return False
        if lower in self.words or lower in self.phrases:
            return True
        return any(safe in lower for safe in self.words)

    def phrase_spans(self, text: str) -> List[Tuple[int, int]]:
        """Return (start, end) spans of every whitelisted phrase in text."""
        spans = []
        for pattern in self._phrase_patterns:
            spans.extend(m.span() for m in pattern.finditer(text))
        return spans

    def extended(self, words: Iterable[str] = (), phrases: Iterable[str] = ()) -> "Whitelist":
        """Return a new whitelist with extra entries appended."""
        return Whitelist(list(self.words) + list(words), list(self.phrases) + list(phrases))


DEFAULT = Whitelist(DEFAULT_WHITELIST, DEFAULT_PHRASES)


def load_whitelist(custom_path: str = "") -> Whitelist:
    """
    Load the whitelist, merging entries from a custom file if given.

    The file holds one word or phrase per line; ``#`` starts a comment.
    Entries containing whitespace are treated as phrases.
    """
    if not custom_path:
        return DEFAULT

    path = Path(custom_path)
    if not path.exists():
        logger.warning(f"Custom whitelist not found: {path}, using default")
        return DEFAULT

    words, phrases = [], []
    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip().lower()
            if not line or line.startswith("#"):
                continue
            if len(line.split()) > 1:
                phrases.append(" ".join(line.split()))
            else:
                words.append(line)

    logger.info(f"Loaded {len(words)} words and {len(phrases)} phrases from {path}")
    return DEFAULT.extended(words, phrases)
