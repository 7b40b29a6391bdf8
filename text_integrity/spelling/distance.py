"""
Edit-distance matching against the common-word dictionaries.

Distance is optimal string alignment: insert, delete, substitute and
swapping two adjacent letters each cost one edit.
"""

from typing import Iterable, Optional, Tuple


def edit_distance(a: str, b: str) -> int:
    """
    Optimal string alignment distance between two strings.

    Examples:
        edit_distance("kitten", "sitting") -> 3
        edit_distance("wierd", "weird") -> 1
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Three rolling rows: two back, previous and current
    before = None
    previous = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            current[j] = min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            )
            if (before is not None and i > 1 and j > 1
                    and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]):
                current[j] = min(current[j], before[j - 2] + 1)  # transposition
        before, previous = previous, current
    return previous[len(b)]


def max_distance_for(word: str) -> int:
    """Largest distance accepted for a suggestion: 2 for short words, 3 otherwise."""
    return 2 if len(word) <= 4 else 3


def find_nearest(
    word: str,
    dictionary: Iterable[str],
    max_distance: Optional[int] = None,
) -> Optional[Tuple[str, int]]:
    """
    Find the closest dictionary word and its distance.

    Only words whose length is within 2 of the query (and at least 2) are
    compared. On a tie the word met first in the dictionary wins.

    Args:
        word: Word to look up (compared lowercase)
        dictionary: Candidate words, iterated in order
        max_distance: Optional tighter bound on the accepted distance

    Returns:
        (word, distance) or None if nothing is close enough
    """
    query = word.lower()
    if not query:
        return None

    limit = max_distance_for(query)
    if max_distance is not None:
        limit = min(limit, max_distance)

    low = max(2, len(query) - 2)
    high = len(query) + 2

    best: Optional[Tuple[str, int]] = None
    for candidate in dictionary:
        if not low <= len(candidate) <= high:
            continue
        distance = edit_distance(query, candidate)
        if distance > limit:
            continue
        if best is None or distance < best[1]:
            best = (candidate, distance)
            if distance == 0:
                break
    return best


def nearest(word: str, dictionary: Iterable[str], max_distance: Optional[int] = None) -> Optional[str]:
    """Closest dictionary word to ``word``, or None."""
    found = find_nearest(word, dictionary, max_distance)
    return found[0] if found else None
