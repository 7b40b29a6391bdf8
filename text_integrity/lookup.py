"""
Typed, read-only lookup structures shared by the dictionaries.

Word lists and correction maps are built once at import time and never
mutated afterwards. Iteration order is the insertion order, so anything
that walks a dictionary (nearest-word search, auto-correct) is
deterministic across runs.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple


class WordSet:
    """Ordered, immutable set of lowercase words."""

    __slots__ = ("_words", "_members")

    def __init__(self, words: Iterable[str] = ()):
        ordered: Dict[str, None] = {}
        for word in words:
            ordered.setdefault(word.lower(), None)
        self._words: Tuple[str, ...] = tuple(ordered)
        self._members = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordSet({len(self._words)} words)"


class CorrectionMap(Mapping):
    """Ordered, read-only mapping of misspelled form -> canonical form."""

    def __init__(self, entries: Iterable[Tuple[str, str]] = ()):
        data: Dict[str, str] = {}
        for wrong, right in entries:
            # Later duplicates win, matching plain dict literal semantics
            data[wrong.lower()] = right
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CorrectionMap({len(self._data)} entries)"

    def lookup(self, word: str) -> Optional[str]:
        return self._data.get(word.lower())
