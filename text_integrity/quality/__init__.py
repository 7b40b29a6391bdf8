"""Readability, scoring and auto-correction."""

from .readability import READABILITY_LEVELS, calculate_readability, count_syllables, readability_level
from .aggregator import (
    SEVERITY_WEIGHTS,
    QualityAggregator,
    join_text,
    quality_score,
    summarize,
)
from .autocorrect import AutoCorrector, match_case

__all__ = [
    'READABILITY_LEVELS',
    'calculate_readability',
    'count_syllables',
    'readability_level',
    'SEVERITY_WEIGHTS',
    'QualityAggregator',
    'join_text',
    'quality_score',
    'summarize',
    'AutoCorrector',
    'match_case',
]
