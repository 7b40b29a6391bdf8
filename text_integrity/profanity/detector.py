"""
Profanity detection in free-form text.

Features:
- Leetspeak-aware patterns compiled from root words (sh1t, b!tch, @sshole)
- Elongation tolerance (fuuuuck)
- Separator tolerance (f.u.c.k, s h i t)
- Normalization fallback that compares cleaned tokens with the roots
- Whitelist filtering of every candidate match
- Count-based severity and equal-length masking
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..models import Language, ScanResult
from ..validator import ensure_text, validate_mask_char
from .compiler import PatternCompiler
from .severity import NONE, classify_severity
from .substitutions import LEETSPEAK_MAP, REVERSE_LEETSPEAK_MAP, SEPARATOR_CHARS
from .whitelist import DEFAULT as DEFAULT_WHITELIST, Whitelist
from .wordlist import DEFAULT_ROOTS, ENGLISH, TAGALOG, RootWord

logger = logging.getLogger(__name__)

DEFAULT_MASK_CHAR = "*"

_SEPARATOR_RUN = re.compile("[" + re.escape(SEPARATOR_CHARS) + "]+")
_NON_WORD = re.compile(r"[\W_]+")


def collapse_repeated_chars(word: str) -> str:
    """
    Collapse runs of 3+ identical characters down to 2.

    Examples:
        fuuuuck -> fuuck
        shiiiit -> shiit
        book -> book
    """
    return re.sub(r'(.)\1{2,}', r'\1\1', word)


def remove_leetspeak(word: str) -> str:
    """
    Convert leetspeak characters back to the letters they stand for.

    Examples:
        sh1t -> shit
        a$$ -> ass
        f@ck -> fack
    """
    return "".join(REVERSE_LEETSPEAK_MAP.get(char, char) for char in word)


def normalize_token(token: str) -> str:
    """
    Reduce one whitespace-delimited token to a plain comparable form.

    Lowercase, collapse long runs, undo leetspeak, drop separators, then
    drop any remaining punctuation.
    """
    result = collapse_repeated_chars(token.lower())
    result = remove_leetspeak(result)
    result = _SEPARATOR_RUN.sub("", result)
    return _NON_WORD.sub("", result)


def normalize_text(text: str) -> str:
    """Normalize every token of a text; tokens that normalize to nothing are dropped."""
    text = ensure_text(text)
    tokens = (normalize_token(t) for t in text.split())
    return " ".join(t for t in tokens if t)


@dataclass(frozen=True)
class Candidate:
    """A match that survived whitelist filtering."""
    text: str
    language: str
    start: int
    end: int
    source: str  # "pattern", "separated" or "normalized"

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end


def _merge_languages(languages: Sequence[str]) -> Optional[str]:
    found = set(languages)
    if TAGALOG in found and ENGLISH in found:
        return Language.MIXED.value
    if TAGALOG in found:
        return TAGALOG
    if ENGLISH in found:
        return ENGLISH
    return None


class ProfanityScanner:
    """
    Detects, classifies and masks profanity.

    The scanner owns its PatternCompiler, so compiled patterns live as
    long as the scanner does. Build one scanner at startup and share it;
    every method is safe to call from several threads.
    """

    def __init__(
        self,
        roots: Sequence[RootWord] = DEFAULT_ROOTS,
        whitelist: Whitelist = DEFAULT_WHITELIST,
        compiler: Optional[PatternCompiler] = None,
        mask_char: str = DEFAULT_MASK_CHAR,
    ):
        self.roots: Tuple[RootWord, ...] = tuple(roots)
        self.whitelist = whitelist
        self.compiler = compiler or PatternCompiler()
        reserved = "".join(alt for _, alts in LEETSPEAK_MAP.items() for alt in alts)
        self.mask_char = validate_mask_char(mask_char, reserved)

        # First language wins when a word is listed under both
        self._root_index: Dict[str, RootWord] = {}
        for root in self.roots:
            self._root_index.setdefault(root.word, root)

    def warm_up(self) -> int:
        """Compile every root pattern up front."""
        count = self.compiler.warm_up(r.word for r in self.roots)
        logger.info(f"Precompiled {count} profanity patterns")
        return count

    def _all_tokens_safe(self, text: str) -> bool:
        """
        True when no pattern can match: every token is whitelisted or is a
        lone short token. Consecutive short tokens ("s h i t") still get
        the full scan.
        """
        tokens = text.lower().split()
        if not tokens:
            return False
        previous_short = False
        for token in tokens:
            short = len(token) < 3
            if short and previous_short:
                return False
            if not short and not self.whitelist.is_whitelisted(token):
                return False
            previous_short = short
        return True

    def _candidates(self, text: str) -> Iterator[Candidate]:
        """
        Yield accepted matches lazily, pattern matches first.

        A candidate is rejected when it is whitelisted, lies inside a
        whitelisted phrase, or overlaps an already accepted match.
        """
        accepted: List[Candidate] = []
        safe_spans = self.whitelist.phrase_spans(text)

        def accept(candidate: Candidate) -> bool:
            if self.whitelist.is_whitelisted(candidate.text):
                logger.debug(f"Whitelisted candidate '{candidate.text}'")
                return False
            if any(s <= candidate.start and candidate.end <= e for s, e in safe_spans):
                logger.debug(f"Candidate '{candidate.text}' is inside a whitelisted phrase")
                return False
            if any(a.overlaps(candidate.start, candidate.end) for a in accepted):
                return False
            accepted.append(candidate)
            return True

        for root in self.roots:
            compiled = self.compiler.compile(root.word)
            for separated in (False, True):
                source = "separated" if separated else "pattern"
                for match in compiled.finditer(text, separated=separated):
                    candidate = Candidate(match.group(), root.language, match.start(), match.end(), source)
                    if accept(candidate):
                        yield candidate

        # Cheaper recall net over tokens the patterns did not already cover
        for token in re.finditer(r"\S+", text):
            start, end = token.span()
            if any(a.overlaps(start, end) for a in accepted):
                continue
            normalized = normalize_token(token.group())
            root = self._root_index.get(normalized)
            if root is None:
                continue
            candidate = Candidate(normalized, root.language, start, end, "normalized")
            if accept(candidate):
                yield candidate

    def scan(self, text: str) -> ScanResult:
        """
        Check text for profanity.

        Args:
            text: The text to check

        Returns:
            ScanResult with deduplicated matches (in text order) and the
            language tag: "tagalog", "english", "mixed" or None
        """
        text = ensure_text(text)
        if not text.strip() or self._all_tokens_safe(text):
            return ScanResult()

        candidates = sorted(self._candidates(text), key=lambda c: (c.start, c.end))

        matches: List[str] = []
        seen = set()
        for candidate in candidates:
            key = candidate.text.casefold()
            if key not in seen:
                seen.add(key)
                matches.append(candidate.text)

        result = ScanResult(
            has_profanity=bool(matches),
            matches=matches,
            language=_merge_languages([c.language for c in candidates]),
        )
        logger.debug(f"Scan found {len(matches)} matches (language={result.language})")
        return result

    def fast_check(self, text: str) -> bool:
        """Return True as soon as one match is found."""
        text = ensure_text(text)
        if not text.strip() or self._all_tokens_safe(text):
            return False
        return next(self._candidates(text), None) is not None

    def censor(self, text: str) -> str:
        """
        Mask every pattern match with an equal-length run of the mask character.

        Both the elongated and the separated spellings are masked
        ("s.h.i.t" -> "*******"). The whitelist is not consulted here, so a
        safe word that contains a root is still partly masked
        ("cockpit" -> "****pit") even though ``scan`` reports it as clean.

        Masking repeats until the text is stable: a mask run can act as a
        separator between letters left over from the previous pass.
        """
        text = ensure_text(text)
        if not text:
            return text

        censored = self._mask_once(text)
        while True:
            masked = self._mask_once(censored)
            if masked == censored:
                return censored
            censored = masked

    def _mask_once(self, text: str) -> str:
        def mask(match: re.Match) -> str:
            return self.mask_char * len(match.group())

        for root in self.roots:
            compiled = self.compiler.compile(root.word)
            text = compiled.pattern.sub(mask, text)
            text = compiled.separated.sub(mask, text)
        return text

    def severity(self, text: str) -> str:
        """Get severity tier: 'none' | 'mild' | 'moderate' | 'severe'"""
        result = self.scan(text)
        if not result.has_profanity:
            return NONE
        return classify_severity(len(result.matches))
