"""
Result values produced by the analyzers.

Issues and reports are plain frozen values: an analysis call creates them
and the caller owns them. Nothing in the engine keeps a history.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Category(str, Enum):
    """Broad family an issue belongs to."""
    SPELLING = "spelling"
    GRAMMAR = "grammar"
    READABILITY = "readability"


class Severity(str, Enum):
    """How strongly an issue should be acted on."""
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Language(str, Enum):
    TAGALOG = "tagalog"
    ENGLISH = "english"
    FILIPINO = "filipino"
    MIXED = "mixed"


@dataclass(frozen=True)
class Issue:
    """A single spelling, grammar or readability finding."""
    category: Category
    severity: Severity
    message: str
    kind: str = ""  # rule family, e.g. "repetition", "punctuation"
    word: Optional[str] = None
    suggestion: Optional[str] = None
    language: Optional[str] = None
    position: Optional[int] = None  # token index for spelling issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "kind": self.kind,
            "severity": self.severity.value,
            "word": self.word,
            "message": self.message,
            "suggestion": self.suggestion,
            "language": self.language,
            "position": self.position,
        }


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a profanity scan."""
    has_profanity: bool = False
    matches: List[str] = field(default_factory=list)
    language: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_profanity": self.has_profanity,
            "matches": list(self.matches),
            "language": self.language,
        }


@dataclass(frozen=True)
class Readability:
    """Flesch-style reading ease estimate."""
    score: float = 100.0
    level: str = "Very Easy"
    sentences: int = 0
    words: int = 0
    syllables: int = 0
    avg_words_per_sentence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level,
            "sentences": self.sentences,
            "words": self.words,
            "syllables": self.syllables,
            "avg_words_per_sentence": self.avg_words_per_sentence,
        }


@dataclass(frozen=True)
class Summary:
    status: str = "excellent"
    message: str = "No issues found! Your text looks great."

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message}


@dataclass(frozen=True)
class AnalysisReport:
    """Aggregate of every issue found for one title/content pair."""
    issues: List[Issue] = field(default_factory=list)
    quality_score: int = 100
    readability: Readability = field(default_factory=Readability)
    summary: Summary = field(default_factory=Summary)
    profanity: ScanResult = field(default_factory=ScanResult)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def suggestions(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.SUGGESTION]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_issues": self.has_issues,
            "quality_score": self.quality_score,
            "issue_count": self.issue_count,
            "errors": [i.to_dict() for i in self.errors],
            "warnings": [i.to_dict() for i in self.warnings],
            "suggestions": [i.to_dict() for i in self.suggestions],
            "all_issues": [i.to_dict() for i in self.issues],
            "readability": self.readability.to_dict(),
            "summary": self.summary.to_dict(),
            "profanity": self.profanity.to_dict(),
        }


@dataclass(frozen=True)
class Change:
    """One edit applied by auto-correct."""
    source: str
    target: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.source, "to": self.target, "type": self.type}


@dataclass(frozen=True)
class AutoCorrectResult:
    original: str = ""
    corrected: str = ""
    changes: List[Change] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "corrected": self.corrected,
            "has_changes": self.has_changes,
            "changes": [c.to_dict() for c in self.changes],
        }
