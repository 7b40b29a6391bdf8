"""
Pattern compiler for root words.

A root word is first turned into a small pattern AST: one step per root
character (a literal or a class of look-alikes), optionally interleaved
with separator steps. Separated spellings come in two shapes. Inside a
single token any gap may hold punctuation ("bi-tch", "f*ck"). Once a gap
holds whitespace, every gap must hold a separator ("s h i t"), so letters
are never borrowed from neighbouring words ("The U.S. hit").

The AST is then lowered to a Python regular expression. Keeping the AST
separate from the regex makes the matcher construction easy to inspect
and test.

Example:
    >>> compiled = PatternCompiler().compile("bad")
    >>> compiled.matches("so b4d")
    ['b4d']
"""

import logging
import re
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Pattern, Tuple, Union

from .substitutions import LEETSPEAK_MAP, SEPARATOR_CHARS, SubstitutionTable

logger = logging.getLogger(__name__)

# Whole-word guards: no letter or digit directly before/after a match
WORD_START = r"(?<![^\W_])"
WORD_END = r"(?![^\W_])"

DEFAULT_MAX_SEPARATOR_RUN = 3


@dataclass(frozen=True)
class Literal:
    """Matches one character verbatim."""
    char: str


@dataclass(frozen=True)
class CharClass:
    """Matches any one of several look-alike characters or sequences."""
    alternatives: Tuple[str, ...]


@dataclass(frozen=True)
class Separator:
    """Matches a run of ``min_run`` to ``max_run`` separator characters."""
    chars: str
    max_run: int
    min_run: int = 0


Step = Union[Literal, CharClass, Separator]


def build_steps(
    root: str,
    table: SubstitutionTable = LEETSPEAK_MAP,
    separators: Optional[str] = None,
    max_run: int = DEFAULT_MAX_SEPARATOR_RUN,
    min_run: int = 0,
) -> Tuple[Step, ...]:
    """
    Build the pattern AST for a root word.

    Args:
        root: The root word
        table: Look-alike substitutions per letter
        separators: If given, a Separator step is placed between every
            pair of consecutive root characters
        max_run: Longest separator run tolerated between two characters
        min_run: Shortest separator run required between two characters

    Returns:
        Tuple of steps
    """
    steps: List[Step] = []
    chars = list(root.lower())
    for i, char in enumerate(chars):
        alternatives = table.alternatives(char)
        if alternatives:
            steps.append(CharClass(alternatives))
        else:
            steps.append(Literal(char))
        if separators and i < len(chars) - 1:
            steps.append(Separator(separators, max_run, min_run))
    return tuple(steps)


def lower_step(step: Step, elongate: bool = False) -> str:
    """Lower a single AST step to regex source."""
    if isinstance(step, Separator):
        return f"[{''.join(re.escape(c) for c in step.chars)}]{{{step.min_run},{step.max_run}}}"

    if isinstance(step, Literal):
        source = re.escape(step.char)
    elif all(len(alt) == 1 for alt in step.alternatives):
        source = "[" + "".join(re.escape(alt) for alt in step.alternatives) + "]"
    else:
        # Multi-character look-alikes such as "()" need an alternation;
        # longest first so the sequence wins over its first character
        ordered = sorted(step.alternatives, key=len, reverse=True)
        source = "(?:" + "|".join(re.escape(alt) for alt in ordered) + ")"

    if elongate:
        return source + "+"
    return source


def lower(steps: Iterable[Step], elongate: bool = False, whole_word: bool = False) -> str:
    """Lower a sequence of steps to regex source."""
    body = "".join(lower_step(step, elongate) for step in steps)
    if whole_word:
        return WORD_START + body + WORD_END
    return body


def lower_any(variants: Iterable[Iterable[Step]], whole_word: bool = False) -> str:
    """Lower several step sequences to one alternation, tried in order."""
    body = "(?:" + "|".join(lower(steps) for steps in variants) + ")"
    if whole_word:
        return WORD_START + body + WORD_END
    return body


@dataclass(frozen=True)
class CompiledPattern:
    """
    Matchers for one root word.

    ``pattern`` tolerates look-alikes and elongation ("fuuuck", "b4d").
    ``separated`` tolerates look-alikes and separators between letters,
    either punctuation inside one token ("f.u.c.k", "bi-tch") or a
    separator in every gap ("s h i t"). The ``bounded_*`` forms only
    accept matches that are not glued to neighbouring letters or digits.
    """
    root: str
    steps: Tuple[Step, ...]
    inline_steps: Tuple[Step, ...]
    spaced_steps: Tuple[Step, ...]
    pattern: Pattern
    separated: Pattern
    bounded_pattern: Pattern
    bounded_separated: Pattern

    def finditer(self, text: str, separated: bool = False, whole_word: bool = True) -> Iterator[re.Match]:
        """Iterate over non-overlapping matches in text."""
        if separated:
            regex = self.bounded_separated if whole_word else self.separated
        else:
            regex = self.bounded_pattern if whole_word else self.pattern
        return regex.finditer(text)

    def matches(self, text: str, separated: bool = False, whole_word: bool = True) -> List[str]:
        """Return the matched substrings."""
        return [m.group() for m in self.finditer(text, separated, whole_word)]

    def search(self, text: str) -> bool:
        """True if either bounded variant matches anywhere in text."""
        return bool(self.bounded_pattern.search(text) or self.bounded_separated.search(text))


def compile_root(
    root: str,
    table: SubstitutionTable = LEETSPEAK_MAP,
    separators: str = SEPARATOR_CHARS,
    max_run: int = DEFAULT_MAX_SEPARATOR_RUN,
) -> CompiledPattern:
    """Compile a root word without caching."""
    root = root.lower()
    steps = build_steps(root, table)
    inline = "".join(c for c in separators if not c.isspace())
    inline_steps = build_steps(root, table, separators=inline, max_run=max_run)
    spaced_steps = build_steps(root, table, separators=separators, max_run=max_run, min_run=1)
    variants = (inline_steps, spaced_steps)

    flags = re.IGNORECASE
    return CompiledPattern(
        root=root,
        steps=steps,
        inline_steps=inline_steps,
        spaced_steps=spaced_steps,
        pattern=re.compile(lower(steps, elongate=True), flags),
        separated=re.compile(lower_any(variants), flags),
        bounded_pattern=re.compile(lower(steps, elongate=True, whole_word=True), flags),
        bounded_separated=re.compile(lower_any(variants, whole_word=True), flags),
    )


class PatternCompiler:
    """
    Compiles root words into matchers and memoizes them.

    The cache belongs to the instance. Lookups of already compiled roots
    take no lock; first-time compilation is serialized so that two
    threads compiling the same root store a single pattern.
    """

    def __init__(
        self,
        table: SubstitutionTable = LEETSPEAK_MAP,
        separators: str = SEPARATOR_CHARS,
        max_separator_run: int = DEFAULT_MAX_SEPARATOR_RUN,
    ):
        self.table = table
        self.separators = separators
        self.max_separator_run = max_separator_run
        self._cache: Dict[str, CompiledPattern] = {}
        self._lock = threading.Lock()

    def compile(self, root: str) -> CompiledPattern:
        """Return the compiled pattern for ``root``, building it on first use."""
        key = root.lower()
        compiled = self._cache.get(key)
        if compiled is not None:
            return compiled

        with self._lock:
            compiled = self._cache.get(key)
            if compiled is None:
                compiled = compile_root(key, self.table, self.separators, self.max_separator_run)
                self._cache[key] = compiled
                logger.debug(f"Compiled pattern for '{key}': {compiled.pattern.pattern}")
        return compiled

    def warm_up(self, roots: Iterable[str]) -> int:
        """Precompile a list of roots. Returns the cache size afterwards."""
        for root in roots:
            self.compile(root)
        return len(self._cache)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, root: object) -> bool:
        return isinstance(root, str) and root.lower() in self._cache
