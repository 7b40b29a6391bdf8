"""
Profane root words for Tagalog and English.

Only base forms are listed; spelling variants (leetspeak, elongation,
separators) are produced by the pattern compiler, so each root is
written once.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from ..error_handler import DictionaryError

logger = logging.getLogger(__name__)

TAGALOG = "tagalog"
ENGLISH = "english"
LANGUAGES = (TAGALOG, ENGLISH)


@dataclass(frozen=True)
class RootWord:
    """A flagged base word and the language it belongs to."""
    word: str
    language: str

    def __post_init__(self):
        if self.language not in LANGUAGES:
            raise DictionaryError(
                f"Unknown language '{self.language}' for root '{self.word}'"
            )


BAD_WORD_ROOTS: Dict[str, List[str]] = {
    TAGALOG: [
        "putangina", "tangina", "tngina", "pota", "puta", "gago", "gagu",
        "tanga", "bobo", "vovo", "bubu", "tarantado", "trntado",
        "ulol", "olul", "ulul", "leche", "letse", "piste", "pisti",
        "hindot", "kantot", "tite", "titi", "pepek", "puki", "kiki",
        "kepyas", "jakol", "jabol", "bayag", "bilat", "burat", "kupal",
        "kainin mo to", "haup ka", "hayp", "impi", "sulot", "bugbugan",
        "samantalahin", "bakla", "bading", "inamo", "namo", "namu", "bobomo",
        "pukinangina", "pukinginamo", "taena", "pucha", "pukingina",
    ],
    ENGLISH: [
        "fuck", "fck", "shit", "shet", "bitch", "btch", "asshole",
        "bastard", "bullshit", "dick", "pussy", "penis", "vagina",
        "cock", "cunt", "whore", "slut", "motherfucker", "sex",
        "nigga", "nigger", "faggot", "retard", "rape", "porn",
        "boobs", "tits", "dildo", "blowjob", "handjob", "masturbate",
    ],
}


def _build_default_roots() -> Tuple[RootWord, ...]:
    roots = []
    for language in LANGUAGES:
        for word in BAD_WORD_ROOTS[language]:
            roots.append(RootWord(word.lower(), language))
    return tuple(roots)


DEFAULT_ROOTS: Tuple[RootWord, ...] = _build_default_roots()


def parse_root_line(line: str, default_language: str = ENGLISH) -> RootWord:
    """
    Parse one line of a custom root file.

    Lines are either ``word`` or ``language:word``.

    Raises:
        DictionaryError: If the language prefix is unknown or the word is empty
    """
    language = default_language
    word = line
    if ":" in line:
        prefix, _, rest = line.partition(":")
        language = prefix.strip().lower()
        word = rest
    word = word.strip().lower()
    if not word:
        raise DictionaryError(f"Empty root word in line: {line!r}")
    return RootWord(word, language)


def load_root_words(custom_path: str = "") -> Tuple[RootWord, ...]:
    """
    Load the root word list.

    If a custom path is provided, roots from that file (one per line,
    ``#`` comments allowed) are MERGED after the defaults.

    Args:
        custom_path: Optional path to a custom root list

    Returns:
        Tuple of RootWord, defaults first, without duplicates
    """
    roots = list(DEFAULT_ROOTS)

    if not custom_path:
        logger.info(f"Using default root list ({len(roots)} roots)")
        return tuple(roots)

    path = Path(custom_path)
    if not path.exists():
        logger.warning(f"Custom root list not found: {path}, using default")
        return tuple(roots)

    seen = {(r.word, r.language) for r in roots}
    added = 0
    with open(path, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            try:
                root = parse_root_line(line)
            except DictionaryError as e:
                raise DictionaryError(f"{path}:{lineno}: {e}") from e
            if (root.word, root.language) in seen:
                continue
            seen.add((root.word, root.language))
            roots.append(root)
            added += 1

    logger.info(f"Loaded {added} custom roots from {path} ({len(roots)} total)")
    return tuple(roots)
