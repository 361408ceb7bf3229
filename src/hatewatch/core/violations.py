"""UU ITE legal-violation annotation."""

from typing import List

from .lexicon import (
    UITE_INSULT_PATTERN, UITE_SARA_PATTERN, UITE_VIOLENCE_PATTERN,
    UITE_THREAT_PATTERN, UITE_CONDITIONAL_PATTERN,
    UITE_HOAX_PATTERN, UITE_POLITICAL_PATTERN,
    NO_VIOLATION_DESCRIPTION,
)
from .models import Severity, UiteViolation
from .text import lower


# (article, severity, clause) per rule, in detection order
_RULES = [
    ("27(3)", Severity.MEDIUM, "Potensi penghinaan dan pencemaran nama baik."),
    ("28(2)", Severity.HIGH, "Potensi menimbulkan kebencian berdasarkan suku, agama, ras, dan antargolongan (SARA)."),
    ("45A(2)", Severity.HIGH, "Potensi ancaman kekerasan atau terorisme."),
    ("27(4)", Severity.HIGH, "Potensi pemerasan dan pengancaman."),
    ("28(1)", Severity.MEDIUM, "Potensi penyebaran berita bohong dan menyesatkan."),
]


def _matched_rules(text: str, is_hate: bool) -> List[bool]:
    return [
        bool(UITE_INSULT_PATTERN.search(text)),
        is_hate and bool(UITE_SARA_PATTERN.search(text)),
        bool(UITE_VIOLENCE_PATTERN.search(text)),
        bool(UITE_THREAT_PATTERN.search(text)) and bool(UITE_CONDITIONAL_PATTERN.search(text)),
        bool(UITE_HOAX_PATTERN.search(text)) and bool(UITE_POLITICAL_PATTERN.search(text)),
    ]


def annotate_violation(text, is_hate: bool) -> UiteViolation:
    """Tag the UU ITE articles a comment potentially violates.

    Rules fire independently; articles keep rule order and the highest
    severity among matched rules wins.
    """
    text = lower(text)
    articles = []
    clauses = []
    severity = Severity.LOW

    for (article, rule_severity, clause), matched in zip(_RULES, _matched_rules(text, is_hate)):
        if not matched:
            continue
        articles.append(article)
        clauses.append(clause)
        if rule_severity.rank > severity.rank:
            severity = rule_severity

    description = " ".join(clauses).strip() or NO_VIOLATION_DESCRIPTION
    return UiteViolation(articles=tuple(articles), severity=severity, description=description)
