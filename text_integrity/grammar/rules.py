"""
Grammar rule table.

Each rule is a compiled pattern plus the issue it produces. Rules are
independent: every rule runs over the whole text and overlapping
findings are expected.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ..models import Category, Language, Severity

DEFAULT_LONG_SENTENCE_CHARS = 200

_DETERMINERS = "the|a|an|your|my|his|her|its|our|their"

_YOU_NOUNS = (
    "share|name|email|phone|address|account|password|profile|photo|picture|file|document|"
    "report|assignment|project|schedule|class|classes|course|courses|grade|grades|team|"
    "group|department|office|request|application|submission|announcement|message|post|"
    "comment|feedback|review|opinion|idea|question|answer|response|choice|decision|"
    "preference|permission|access|role|status|information|data|details|settings|options"
)

_CONTRACTIONS = (
    "you're|we're|they're|i'm|he's|she's|it's|that's|there's|here's|what's|who's|how's|"
    "where's|when's|isn't|aren't|wasn't|weren't|don't|doesn't|didn't|won't|wouldn't|"
    "couldn't|shouldn't|can't|haven't|hasn't|hadn't"
)

_MODALS = ("should", "could", "would", "might", "must")


@dataclass(frozen=True)
class GrammarRule:
    """A single pattern-based grammar check."""
    name: str
    pattern: Pattern
    message: str
    kind: str
    severity: Severity
    category: Category = Category.GRAMMAR
    suggestion: Optional[str] = None
    end_of_text: bool = False  # tested once against the stripped text
    language: Optional[str] = None

    def finditer(self, text: str):
        if self.end_of_text:
            match = self.pattern.search(text.strip())
            return iter([match] if match else [])
        return self.pattern.finditer(text)


def _rule(name, pattern, message, kind, severity, flags=re.IGNORECASE, **kwargs) -> GrammarRule:
    return GrammarRule(
        name=name,
        pattern=re.compile(pattern, flags),
        message=message,
        kind=kind,
        severity=severity,
        **kwargs
    )


def _modal_rules() -> List[GrammarRule]:
    return [
        _rule(
            f"{modal}_of",
            rf"\b{modal} of\b",
            f'"{modal} of" should be "{modal} have"',
            "grammar",
            Severity.ERROR,
            suggestion=f"{modal} have",
        )
        for modal in _MODALS
    ]


def english_rules(long_sentence_chars: int = DEFAULT_LONG_SENTENCE_CHARS) -> List[GrammarRule]:
    """English rules in evaluation order."""
    return [
        _rule("repeated_word", r"\b(\w+)\s+\1\b",
              "Repeated word detected", "repetition", Severity.WARNING),
        _rule("double_article", rf"\b(the|a|an)\s+({_DETERMINERS})\b",
              "Double article/determiner detected - remove one", "grammar", Severity.ERROR),
        _rule("double_determiner", rf"\b(your|my|his|her|its|our|their)\s+({_DETERMINERS})\b",
              "Double determiner detected - remove one", "grammar", Severity.ERROR),
        _rule("missing_space", r"[.!?](?=[A-Z])",
              "Missing space after punctuation", "punctuation", Severity.SUGGESTION, flags=0),
        _rule("multiple_spaces", r"[ \t]{2,}",
              "Multiple consecutive spaces", "spacing", Severity.SUGGESTION, flags=0),
        _rule("lowercase_sentence_start", r"\.\s+[a-z]",
              "Sentence should start with uppercase letter", "capitalization", Severity.WARNING, flags=0),
        _rule("missing_end_punctuation", r"[a-zA-Z]$",
              "Missing punctuation at end of text", "punctuation", Severity.SUGGESTION,
              flags=0, end_of_text=True),
        *_modal_rules(),
        _rule("their_there", r"\btheir\s+(is|are|was|were|will|would|could|should)\b",
              '"their" might be "there" in this context', "grammar", Severity.WARNING),
        _rule("you_your", rf"\byou\s+({_YOU_NOUNS})\b",
              '"you" should be "your" before a noun', "grammar", Severity.ERROR, suggestion="your"),
        _rule("dangling_contraction", rf"\b({_CONTRACTIONS})\s*[.!?,;]?\s*$",
              "Sentence appears incomplete - contraction at end without following word",
              "grammar", Severity.WARNING),
        _rule("your_youre", r"\byour\s+(welcome|right|wrong|correct|going|coming)\b",
              "\"your\" might be \"you're\" in this context", "grammar", Severity.WARNING),
        _rule("its_its", r"\bits\s+(a|an|the|going|been|not|very|really)\b",
              "\"its\" might be \"it's\" in this context", "grammar", Severity.WARNING),
        _rule("affect_effect", r"\bthe affect\b",
              '"affect" might be "effect" (noun form)', "grammar", Severity.WARNING),
        _rule("then_than", r"\b(more|less|better|worse|greater|smaller|bigger|larger|higher|lower)\s+then\b",
              '"then" should be "than" for comparisons', "grammar", Severity.ERROR, suggestion="than"),
        # Case-sensitive: only a lowercase article is checked
        _rule("a_before_vowel", r"\ba\s+[aeiouAEIOU]\w+",
              'Consider using "an" before words starting with a vowel sound',
              "grammar", Severity.SUGGESTION, flags=0),
        _rule("an_before_consonant", r"\ban\s+[bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ]\w+",
              'Consider using "a" before words starting with a consonant sound',
              "grammar", Severity.SUGGESTION, flags=0),
        _rule("pronoun_agreement", r"\b(everyone|everybody|someone|nobody)\s+(are|were|have)\b",
              "Indefinite pronoun takes a singular verb (is/was/has)", "grammar", Severity.ERROR),
        _rule("long_sentence", rf"[^.!?]{{{long_sentence_chars},}}",
              "Very long sentence - consider breaking into smaller sentences",
              "readability", Severity.SUGGESTION, flags=0, category=Category.READABILITY),
    ]


def filipino_rules() -> List[GrammarRule]:
    """Filipino and Taglish rules; messages are in Filipino."""
    fil = Language.FILIPINO.value
    return [
        _rule("double_na", r"\b(na)\s+(na)\b",
              'Paulit-ulit na linker "na na" - alisin ang isa', "grammar", Severity.ERROR, language=fil),
        _rule("double_ng", r"\b(ng)\s+(ng)\b",
              'Paulit-ulit na linker "ng ng" - alisin ang isa', "grammar", Severity.ERROR, language=fil),
        _rule("ako_ay", r"\bako ay\b",
              "\"ako ay\" - mas natural ang \"ako'y\" o baguhin ang pangungusap",
              "grammar", Severity.SUGGESTION, language=fil),
        _rule("siya_ay", r"\bsiya ay\b",
              "\"siya ay\" - mas natural ang \"siya'y\" o baguhin ang pangungusap",
              "grammar", Severity.SUGGESTION, language=fil),
        _rule("missing_ng_linker", r"\b(gusto|ayaw|kailangan|dapat)\s+(ako|ikaw|siya|kami|tayo|kayo|sila)\b",
              'Dapat may "ng" pagkatapos - halimbawa: "gusto kong"', "grammar", Severity.WARNING, language=fil),
        _rule("double_po", r"\bpo\s+po\b",
              'Paulit-ulit na "po" - isa lang ang kailangan', "grammar", Severity.WARNING, language=fil),
        _rule("taglish_i_am", r"\bi am\s+(ako|siya|kami|tayo|kayo|sila)\b",
              "Halo-halong wika - piliin ang English o Filipino", "grammar", Severity.SUGGESTION, language=fil),
        _rule("ang_before_verb", r"\bang\s+(kumain|uminom|maglaro|magtrabaho|magbasa|magsulat)\b",
              'Dapat "ang pag-" bago ang pandiwa', "grammar", Severity.WARNING, language=fil),
        _rule("double_mga", r"\bmga\s+mga\b",
              'Paulit-ulit na "mga" - alisin ang isa', "grammar", Severity.ERROR, language=fil),
        _rule("text_speak", r"\b(poh|pow|opow|opoh|cguro|cge|cya|xa|nman|nmn|kc|lng)\b",
              "Tekstong pang-chat - gamitin ang tamang baybay para sa pormal na anunsyo",
              "spelling", Severity.WARNING, category=Category.SPELLING, language=fil),
    ]


def build_rules(
    long_sentence_chars: int = DEFAULT_LONG_SENTENCE_CHARS,
    include_filipino: bool = True,
) -> List[GrammarRule]:
    """English rules followed by the Filipino rules."""
    rules = english_rules(long_sentence_chars)
    if include_filipino:
        rules.extend(filipino_rules())
    return rules


DEFAULT_RULES = tuple(build_rules())
