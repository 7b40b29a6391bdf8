"""Spelling subpackage: dictionaries, edit distance and the checker."""

from .dictionaries import (
    ENGLISH_MISSPELLINGS,
    ENGLISH_WORDS,
    FILIPINO_MISSPELLINGS,
    FILIPINO_WORDS,
)
from .distance import edit_distance, find_nearest, max_distance_for, nearest
from .word_shape import is_implausible, looks_like_english, looks_like_filipino
from .checker import SpellingChecker

__all__ = [
    'ENGLISH_MISSPELLINGS',
    'ENGLISH_WORDS',
    'FILIPINO_MISSPELLINGS',
    'FILIPINO_WORDS',
    'edit_distance',
    'find_nearest',
    'max_distance_for',
    'nearest',
    'is_implausible',
    'looks_like_english',
    'looks_like_filipino',
    'SpellingChecker',
]
