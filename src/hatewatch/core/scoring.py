"""Aggregate statistics over classified comments."""

import logging
from collections import Counter
from typing import Dict, List, Sequence

from .constants import ClassifierConstants
from .models import ClassificationResult, Sentiment, Severity, SpeechActType, Statistics, ViolationSummary
from .lexicon import ARTICLE_LABELS, ITE_VIOLATION_LABELS

logger = logging.getLogger(__name__)

HATE_CATEGORIES = ["SARA", "Penghinaan", "Provokasi", ClassifierConstants.DEFAULT_CATEGORY]


def percentage(count: int, total: int) -> int:
    """100 * count / total rounded half-up; 0 for an empty corpus."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def aggregate(results: Sequence[ClassificationResult]) -> Statistics:
    """Count sentiments and derive independently rounded percentages."""
    total = len(results)
    counts = Counter(r.sentiment for r in results)
    hate = counts[Sentiment.HATE]
    neutral = counts[Sentiment.NEUTRAL]
    positive = counts[Sentiment.POSITIVE]

    return Statistics(
        total=total,
        hate=hate,
        neutral=neutral,
        positive=positive,
        hate_percentage=percentage(hate, total),
        neutral_percentage=percentage(neutral, total),
        positive_percentage=percentage(positive, total),
    )


def category_breakdown(results: Sequence[ClassificationResult]) -> Dict[str, int]:
    """Hate comments per category, counted from each comment's own category."""
    out = {name: 0 for name in HATE_CATEGORIES}
    for r in results:
        category = r.category
        if category is not None:
            out[category] = out.get(category, 0) + 1
    return out


def speech_act_breakdown(results: Sequence[ClassificationResult]) -> Dict[str, int]:
    out = {t.value: 0 for t in SpeechActType}
    for r in results:
        out[r.speech_act.type.value] += 1
    return out


def ite_violation_breakdown(results: Sequence[ClassificationResult]) -> Dict[str, int]:
    out = {vtype: 0 for vtype in ITE_VIOLATION_LABELS}
    for r in results:
        if r.ite_violation is not None:
            out[r.ite_violation.type] = out.get(r.ite_violation.type, 0) + 1
    return out


def summarize_violations(results: Sequence[ClassificationResult]) -> ViolationSummary:
    """Group UU ITE violations by severity and count cited articles."""
    violating: List[ClassificationResult] = [r for r in results if r.violation.has_violation]

    by_severity = {s.value: 0 for s in Severity}
    articles = Counter()
    for r in violating:
        by_severity[r.violation.severity.value] += 1
        articles.update(r.violation.articles)

    # Articles in statute-table order
    article_counts = {a: articles[a] for a in ARTICLE_LABELS if articles[a]}
    for a, n in articles.items():
        article_counts.setdefault(a, n)

    logger.debug(f"{len(violating)} of {len(results)} comments carry a potential UU ITE violation")
    return ViolationSummary(
        total_comments=len(results),
        total_violations=len(violating),
        violation_percentage=percentage(len(violating), len(results)),
        by_severity=by_severity,
        article_counts=article_counts,
    )
