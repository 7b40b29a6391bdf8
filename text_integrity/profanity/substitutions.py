"""
Leetspeak substitution tables.

The forward table drives pattern compilation (letter -> look-alikes);
the reverse table drives normalization (look-alike -> letter).
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple


class SubstitutionTable:
    """Immutable mapping of base letter to ordered look-alike alternatives."""

    def __init__(self, table: Mapping[str, Iterable[str]]):
        frozen: Dict[str, Tuple[str, ...]] = {}
        for letter, alternatives in table.items():
            ordered = []
            for alt in alternatives:
                if alt and alt not in ordered:
                    ordered.append(alt)
            # The letter itself is always an accepted spelling of itself
            if letter not in ordered:
                ordered.insert(0, letter)
            frozen[letter.lower()] = tuple(ordered)
        self._table = MappingProxyType(frozen)

    def alternatives(self, char: str) -> Tuple[str, ...]:
        """Return look-alikes for ``char``, or an empty tuple if it has none."""
        return self._table.get(char.lower(), ())

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and char.lower() in self._table

    def __len__(self) -> int:
        return len(self._table)

    def items(self):
        return self._table.items()


LEETSPEAK_MAP = SubstitutionTable({
    'a': ['a', '4', '@', 'e'],
    'b': ['b', '8', '6'],
    'c': ['c', '(', '<', 'k', 's'],
    'e': ['e', '3', 'a'],
    'g': ['g', '6', '9', 'q'],
    'i': ['i', '1', '!', 'l', '|'],
    'k': ['k', 'c', 'x'],
    'l': ['l', '1', '|', 'i'],
    'o': ['o', '0', '()', '@'],
    's': ['s', '5', '$', 'z'],
    't': ['t', '7', '+'],
    'u': ['u', 'v', 'w'],
    'y': ['y', 'j'],
})

REVERSE_LEETSPEAK_MAP: Mapping[str, str] = MappingProxyType({
    '0': 'o',
    '1': 'i',
    '2': 'z',
    '3': 'e',
    '4': 'a',
    '5': 's',
    '6': 'g',
    '7': 't',
    '8': 'b',
    '9': 'g',
    '@': 'a',
    '$': 's',
    '!': 'i',
    '|': 'l',
    '+': 't',
    '(': 'c',
    '<': 'c',
})

# Characters tolerated between letters of a root ("f.u.c.k", "s h i t")
SEPARATOR_CHARS = " \t\n.-_*"
