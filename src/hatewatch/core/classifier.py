"""Sentiment, hate category and ITE violation-type classification."""

from typing import Optional, Sequence

from .constants import ClassifierConstants
from .lexicon import (
    HATE_KEYWORDS, POSITIVE_KEYWORDS,
    SARA_PATTERN, INSULT_PATTERN, PROVOCATION_PATTERN,
    DEFAMATION_PATTERN, BLASPHEMY_PATTERN, INCITEMENT_PATTERN, HOAX_PATTERN, UNPLEASANT_PATTERN,
    ITE_VIOLATION_LABELS,
)
from .models import Hate, IteViolation, Neutral, Positive, Verdict
from .text import lower


def _keyword_count(text: str, keywords: Sequence[str]) -> int:
    return sum(1 for kw in keywords if kw in text)


def _keyword_confidence(count: int) -> float:
    conf = ClassifierConstants.BASE_CONFIDENCE + ClassifierConstants.CONFIDENCE_STEP * count
    return round(min(ClassifierConstants.MAX_CONFIDENCE, conf), 2)


def categorize(text) -> str:
    """Hate-speech category by pattern priority: SARA, insult, provocation."""
    text = lower(text)
    if SARA_PATTERN.search(text):
        return "SARA"
    if INSULT_PATTERN.search(text):
        return "Penghinaan"
    if PROVOCATION_PATTERN.search(text):
        return "Provokasi"
    return ClassifierConstants.DEFAULT_CATEGORY


def classify(text, neutral_confidence: float = 0.7) -> Verdict:
    """Classify a comment as hate, positive or neutral using the keyword lexicons.

    Hate keywords take priority over positive ones. Confidence grows by 0.1
    per matched keyword from 0.6 and is capped at 0.9; neutral verdicts get
    the caller's baseline.
    """
    text = lower(text)
    hate_count = _keyword_count(text, HATE_KEYWORDS)
    if hate_count > 0:
        return Hate(confidence=_keyword_confidence(hate_count), category=categorize(text))

    positive_count = _keyword_count(text, POSITIVE_KEYWORDS)
    if positive_count > 0:
        return Positive(confidence=_keyword_confidence(positive_count))

    return Neutral(confidence=neutral_confidence)


def classify_ite_violation(text, is_hate: bool) -> Optional[IteViolation]:
    """Pick the first matching ITE violation type, or None."""
    text = lower(text)

    if DEFAMATION_PATTERN.search(text):
        vtype = "defamation"
    elif BLASPHEMY_PATTERN.search(text):
        vtype = "blasphemy"
    elif is_hate and INCITEMENT_PATTERN.search(text):
        vtype = "incitement"
    elif HOAX_PATTERN.search(text):
        vtype = "hoax"
    elif is_hate and UNPLEASANT_PATTERN.search(text):
        vtype = "unpleasant_acts"
    else:
        return None

    return IteViolation(type=vtype, label=ITE_VIOLATION_LABELS[vtype])
