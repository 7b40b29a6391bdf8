"""
Spelling checker for mixed English and Filipino text.

Each whitespace token is checked in order against the Filipino and
English misspelling maps, then the common-word lists, then the
word-shape heuristics, and finally an edit-distance search. The first
step that decides a token ends its check.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..lookup import CorrectionMap, WordSet
from ..models import Category, Issue, Language, Severity
from ..validator import ensure_text
from .dictionaries import (
    ENGLISH_MISSPELLINGS,
    ENGLISH_WORDS,
    FILIPINO_MISSPELLINGS,
    FILIPINO_WORDS,
)
from .distance import find_nearest
from .word_shape import is_implausible

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_DISTANCE = 2

_NOT_LETTER = re.compile(r"[^a-z'ñ]")


def clean_token(token: str) -> str:
    """Lowercase a token and keep only letters, 'ñ' and apostrophes."""
    return _NOT_LETTER.sub('', token.lower())


def should_skip(token: str, cleaned: str) -> bool:
    """Tokens that are never spell-checked: too short, acronyms, contractions."""
    if len(cleaned) < 2:
        return True
    if token == token.upper() and len(token) > 1:
        return True
    return "'" in cleaned


class SpellingChecker:
    """
    Checks words against the built-in dictionaries.

    Args:
        english_words: Known-good English words
        filipino_words: Known-good Filipino words
        english_misspellings: English misspelling -> correction
        filipino_misspellings: Filipino misspelling/text-speak -> correction
        suggestion_distance: Largest edit distance reported for an unknown
            word that has a plausible shape
    """

    def __init__(
        self,
        english_words: WordSet = ENGLISH_WORDS,
        filipino_words: WordSet = FILIPINO_WORDS,
        english_misspellings: CorrectionMap = ENGLISH_MISSPELLINGS,
        filipino_misspellings: CorrectionMap = FILIPINO_MISSPELLINGS,
        suggestion_distance: int = DEFAULT_SUGGESTION_DISTANCE,
    ):
        self.english_words = english_words
        self.filipino_words = filipino_words
        self.english_misspellings = english_misspellings
        self.filipino_misspellings = filipino_misspellings
        self.suggestion_distance = suggestion_distance

    def is_known(self, word: str) -> bool:
        return word in self.english_words or word in self.filipino_words

    def closest(self, word: str) -> Optional[Tuple[str, int]]:
        """Best match across both word lists; English wins a tie."""
        english = find_nearest(word, self.english_words)
        filipino = find_nearest(word, self.filipino_words)
        if english and filipino:
            return filipino if filipino[1] < english[1] else english
        return english or filipino

    def check_word(self, token: str, position: Optional[int] = None) -> Optional[Issue]:
        """
        Check a single token.

        Returns:
            An Issue, or None if the token is fine or was skipped
        """
        cleaned = clean_token(token)
        if should_skip(token, cleaned):
            return None

        correction = self.filipino_misspellings.lookup(cleaned)
        if correction is not None:
            return Issue(
                category=Category.SPELLING,
                severity=Severity.WARNING,
                kind="misspelling",
                word=token,
                suggestion=correction,
                message=f'"{token}" - dapat "{correction}" ang tamang baybay',
                language=Language.FILIPINO.value,
                position=position,
            )

        correction = self.english_misspellings.lookup(cleaned)
        if correction is not None:
            return Issue(
                category=Category.SPELLING,
                severity=Severity.ERROR,
                kind="misspelling",
                word=token,
                suggestion=correction,
                message=f'"{token}" might be misspelled. Did you mean "{correction}"?',
                language=Language.ENGLISH.value,
                position=position,
            )

        if self.is_known(cleaned):
            return None

        found = self.closest(cleaned)

        if is_implausible(cleaned):
            suggestion = found[0] if found else None
            if suggestion:
                message = f'"{token}" appears misspelled. Did you mean "{suggestion}"?'
            else:
                message = f'"{token}" doesn\'t appear to be a valid word.'
            return Issue(
                category=Category.SPELLING,
                severity=Severity.ERROR,
                kind="unrecognized",
                word=token,
                suggestion=suggestion,
                message=message,
                position=position,
            )

        if found and found[1] <= self.suggestion_distance:
            return Issue(
                category=Category.SPELLING,
                severity=Severity.WARNING,
                kind="typo",
                word=token,
                suggestion=found[0],
                message=f'"{token}" might be misspelled. Did you mean "{found[0]}"?',
                language=(Language.ENGLISH.value if found[0] in self.english_words
                          else Language.FILIPINO.value),
                position=position,
            )
        return None

    def check(self, text: str) -> List[Issue]:
        """
        Check text for spelling errors (English and Filipino).

        Args:
            text: Text to check

        Returns:
            Issues in token order; ``position`` is the token index
        """
        text = ensure_text(text)
        issues = []
        for index, token in enumerate(text.split()):
            issue = self.check_word(token, index)
            if issue is not None:
                issues.append(issue)
        logger.debug(f"Spelling check: {len(issues)} issues in {len(text.split())} tokens")
        return issues
