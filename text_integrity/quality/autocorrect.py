"""
Deterministic auto-correction.

Fixes are applied in a fixed order:

1. Known English misspellings (whole words, case of the first letter kept)
2. Doubled articles/determiners, repeated until none remain
3. Runs of spaces/tabs collapsed to one space
4. "<modal> of" -> "<modal> have"

Running the corrector on its own output changes nothing.
"""

import logging
import re
from typing import List, Match, Pattern, Tuple

from ..lookup import CorrectionMap
from ..models import AutoCorrectResult, Change
from ..spelling import ENGLISH_MISSPELLINGS
from ..validator import ensure_text

logger = logging.getLogger(__name__)

_DOUBLE_ARTICLE = re.compile(
    r'\b(the|a|an)\s+(the|a|an|your|my|his|her|its|our|their)\b', re.IGNORECASE
)
_SPACE_RUN = re.compile(r'[ \t]{2,}')
_MODAL_OF = [
    (modal, re.compile(rf'\b({modal}) of\b', re.IGNORECASE))
    for modal in ("should", "could", "would", "might", "must")
]


def match_case(source: str, replacement: str) -> str:
    """Capitalize ``replacement`` when ``source`` starts with a capital."""
    if source[:1].isupper() and replacement:
        return replacement[0].upper() + replacement[1:]
    return replacement


class AutoCorrector:
    """Applies the safe, unambiguous subset of fixes to a text."""

    def __init__(self, misspellings: CorrectionMap = ENGLISH_MISSPELLINGS):
        self.misspellings = misspellings
        self._misspelling_patterns: List[Tuple[str, str, Pattern]] = [
            (wrong, right, re.compile(rf'\b{re.escape(wrong)}\b', re.IGNORECASE))
            for wrong, right in misspellings.items()
        ]

    def _fix_misspellings(self, text: str, changes: List[Change]) -> str:
        for wrong, right, pattern in self._misspelling_patterns:
            if pattern.search(text):
                changes.append(Change(wrong, right, "spelling"))
                text = pattern.sub(lambda m, r=right: match_case(m.group(), r), text)
        return text

    def _fix_double_articles(self, text: str, changes: List[Change]) -> str:
        def replace(match: Match) -> str:
            target = match_case(match.group(1), match.group(2))
            changes.append(Change(match.group(), target, "grammar"))
            return target

        # "a the the" needs two rounds
        while _DOUBLE_ARTICLE.search(text):
            text = _DOUBLE_ARTICLE.sub(replace, text)
        return text

    def _fix_spacing(self, text: str, changes: List[Change]) -> str:
        if _SPACE_RUN.search(text):
            changes.append(Change("multiple spaces", "single space", "spacing"))
            text = _SPACE_RUN.sub(' ', text)
        return text

    def _fix_modal_of(self, text: str, changes: List[Change]) -> str:
        for modal, pattern in _MODAL_OF:
            if pattern.search(text):
                changes.append(Change(f"{modal} of", f"{modal} have", "grammar"))
                text = pattern.sub(lambda m: f"{m.group(1)} have", text)
        return text

    def correct(self, text: str) -> AutoCorrectResult:
        """
        Apply auto-corrections to text.

        Args:
            text: Text to correct

        Returns:
            AutoCorrectResult with the corrected text and every change made
        """
        original = ensure_text(text)
        changes: List[Change] = []

        corrected = self._fix_misspellings(original, changes)
        corrected = self._fix_double_articles(corrected, changes)
        corrected = self._fix_spacing(corrected, changes)
        corrected = self._fix_modal_of(corrected, changes)

        if changes:
            logger.debug(f"Auto-correct applied {len(changes)} changes")
        return AutoCorrectResult(original=original, corrected=corrected, changes=changes)
