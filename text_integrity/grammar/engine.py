"""Runs the grammar rule table over text and reports each hit as an Issue."""

import logging
from typing import List, Sequence

from ..models import Issue
from ..validator import ensure_text
from .rules import DEFAULT_RULES, GrammarRule

logger = logging.getLogger(__name__)


class GrammarEngine:
    """Runs an ordered rule table over text and collects every finding."""

    def __init__(self, rules: Sequence[GrammarRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def check(self, text: str) -> List[Issue]:
        """
        Check text for grammar issues (English and Filipino).

        Issues come out grouped by rule, in rule order, and within a rule
        in text order.
        """
        text = ensure_text(text)
        if not text.strip():
            return []

        issues = []
        for rule in self.rules:
            for match in rule.finditer(text):
                issues.append(Issue(
                    category=rule.category,
                    severity=rule.severity,
                    kind=rule.kind,
                    message=rule.message,
                    word=None if rule.end_of_text else match.group(),
                    suggestion=rule.suggestion,
                    language=rule.language,
                ))
        logger.debug(f"Grammar check: {len(issues)} issues from {len(self.rules)} rules")
        return issues
