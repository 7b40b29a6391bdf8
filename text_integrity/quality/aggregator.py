"""
Quality aggregation: runs every analyzer over a title/content pair and
folds the findings into one report with a 0-100 quality score.
"""

import logging
from typing import Dict, List, Mapping, Optional

from ..grammar import GrammarEngine
from ..models import AnalysisReport, Issue, Severity, Summary
from ..profanity import ProfanityScanner
from ..spelling import SpellingChecker
from ..validator import ensure_text
from .readability import calculate_readability

logger = logging.getLogger(__name__)

SEVERITY_WEIGHTS: Dict[str, int] = {
    Severity.ERROR.value: 3,
    Severity.WARNING.value: 2,
    Severity.SUGGESTION.value: 1,
}

DEFAULT_PENALTY_PER_POINT = 5


def quality_score(
    issues: List[Issue],
    weights: Mapping[str, int] = SEVERITY_WEIGHTS,
    penalty_per_point: int = DEFAULT_PENALTY_PER_POINT,
) -> int:
    """100 minus the weighted penalty, never below 0."""
    penalty = sum(weights.get(issue.severity.value, 1) for issue in issues)
    return max(0, 100 - penalty * penalty_per_point)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def summarize(errors: int, warnings: int, suggestions: int) -> Summary:
    """Pick the status line by priority: errors, then warnings, then suggestions."""
    if errors:
        return Summary("needs_attention", f"Found {_plural(errors, 'error')} that should be fixed.")
    if warnings:
        return Summary("review", f"Found {_plural(warnings, 'potential issue')} to review.")
    if suggestions:
        return Summary("good", f"Found {_plural(suggestions, 'suggestion')} for improvement.")
    return Summary()


def join_text(title: str, content: str) -> str:
    """Join the non-empty parts of a title/content pair with one space."""
    return " ".join(part for part in (ensure_text(title), ensure_text(content)) if part)


class QualityAggregator:
    """Combines the profanity, spelling, grammar and readability analyzers."""

    def __init__(
        self,
        scanner: Optional[ProfanityScanner] = None,
        spelling: Optional[SpellingChecker] = None,
        grammar: Optional[GrammarEngine] = None,
        weights: Mapping[str, int] = SEVERITY_WEIGHTS,
        penalty_per_point: int = DEFAULT_PENALTY_PER_POINT,
    ):
        self.scanner = scanner or ProfanityScanner()
        self.spelling = spelling or SpellingChecker()
        self.grammar = grammar or GrammarEngine()
        self.weights = dict(weights)
        self.penalty_per_point = penalty_per_point

    def analyze(self, title: str, content: str) -> AnalysisReport:
        """
        Check a title/content pair.

        Spelling and grammar run over the joined text; readability covers
        the content only. The profanity result is reported alongside the
        score and does not affect it.
        """
        content = ensure_text(content)
        full_text = join_text(title, content)

        issues = self.spelling.check(full_text) + self.grammar.check(full_text)
        score = quality_score(issues, self.weights, self.penalty_per_point)

        report = AnalysisReport(
            issues=issues,
            quality_score=score,
            readability=calculate_readability(content),
            summary=summarize(
                sum(1 for i in issues if i.severity == Severity.ERROR),
                sum(1 for i in issues if i.severity == Severity.WARNING),
                sum(1 for i in issues if i.severity == Severity.SUGGESTION),
            ),
            profanity=self.scanner.scan(full_text),
        )
        logger.debug(f"Analysis: {len(issues)} issues, score {score}")
        return report
