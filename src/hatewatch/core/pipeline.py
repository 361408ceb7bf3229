"""Per-comment classification chain plus batch-level analysis."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from .classifier import categorize, classify, classify_ite_violation
from .clustering import cluster
from .config import settings
from .constants import ClassifierConstants
from .entities import extract_entities
from .lexicon import ARTICLE_LABELS, ITE_VIOLATION_LABELS, NO_VIOLATION_DESCRIPTION
from .models import (
    AnalysisReport, ClassificationResult, Comment, Hate, IteViolation, Neutral, Positive,
    PostInfo, Sentiment, Severity, SpeechAct, SpeechActType, UiteViolation, Verdict,
)
from .scoring import (
    HATE_CATEGORIES, aggregate, category_breakdown, ite_violation_breakdown,
    speech_act_breakdown, summarize_violations,
)
from .speech_act import classify_speech_act
from .threads import build_threads
from .violations import annotate_violation

logger = logging.getLogger(__name__)

_SENTIMENTS = {s.value: s for s in Sentiment}
_SPEECH_ACTS = {t.value: t for t in SpeechActType}
_SEVERITIES = {s.value: s for s in Severity}
_ARTICLE_TAGS = {label.lower(): tag for tag, label in ARTICLE_LABELS.items()}


def _valid_confidence(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not 0.0 <= value <= 1.0:
        return None
    return round(float(value), 2)


def _make_verdict(sentiment: Sentiment, confidence: float, category: Optional[str]) -> Verdict:
    if sentiment is Sentiment.HATE:
        return Hate(confidence=confidence, category=category)
    if sentiment is Sentiment.POSITIVE:
        return Positive(confidence=confidence)
    return Neutral(confidence=confidence)


def _merge_verdict(payload: Dict[str, Any], rule: Verdict, text: str) -> Verdict:
    sentiment = _SENTIMENTS.get(payload.get("sentiment"), rule.sentiment)
    confidence = _valid_confidence(payload.get("confidence"))
    if confidence is None:
        confidence = rule.confidence if sentiment is rule.sentiment else ClassifierConstants.BASE_CONFIDENCE

    category = None
    if sentiment is Sentiment.HATE:
        category = payload.get("category")
        if category not in HATE_CATEGORIES:
            category = rule.category if isinstance(rule, Hate) else categorize(text)
    return _make_verdict(sentiment, confidence, category)


def _merge_speech_act(payload: Dict[str, Any], rule: SpeechAct) -> SpeechAct:
    act_type = _SPEECH_ACTS.get(payload.get("speechActType"))
    subtype = payload.get("speechActSubtype")
    if act_type is None or not isinstance(subtype, str) or not subtype.strip():
        return rule
    return SpeechAct(type=act_type, subtype=subtype.strip())


def _merge_ite_violation(payload: Dict[str, Any], rule: Optional[IteViolation]) -> Optional[IteViolation]:
    if "iteViolationType" not in payload:
        return rule
    vtype = payload["iteViolationType"]
    if vtype is None:
        return None
    if vtype not in ITE_VIOLATION_LABELS:
        return rule
    return IteViolation(type=vtype, label=ITE_VIOLATION_LABELS[vtype])


def _article_tag(article: Any) -> Optional[str]:
    """Short article tag for either "28(2)" or "Pasal 28 ayat (2)"."""
    if not isinstance(article, str):
        return None
    article = article.strip()
    if article in ARTICLE_LABELS:
        return article
    return _ARTICLE_TAGS.get(" ".join(article.lower().split()))


def _merge_violation(payload: Dict[str, Any], rule: UiteViolation) -> UiteViolation:
    raw = payload.get("uiteViolation")
    if not isinstance(raw, dict):
        return rule
    articles = raw.get("articles")
    severity = _SEVERITIES.get(raw.get("severity"))
    description = raw.get("description")
    if not isinstance(articles, list):
        return rule
    articles = [_article_tag(a) for a in articles]
    if any(a is None for a in articles):
        return rule
    if severity is None or not isinstance(description, str):
        return rule

    articles = tuple(dict.fromkeys(articles))
    if not articles:
        return UiteViolation(articles=(), severity=Severity.LOW, description=NO_VIOLATION_DESCRIPTION)
    return UiteViolation(articles=articles, severity=severity, description=description.strip() or rule.description)


class AnalysisPipeline:
    """Classify a batch of comments and assemble an AnalysisReport.

    The keyword rules always run. An optional text-classification model may
    raise confidence when it agrees with the rule verdict, and an optional
    generative AI service may override individual fields; both fall back to
    the rule result on any failure.
    """

    def __init__(self, model=None, genai=None, neutral_confidence: Optional[float] = None):
        self.model = model
        self.genai = genai
        self.neutral_confidence = (
            neutral_confidence if neutral_confidence is not None else settings.neutral_confidence
        )

    @property
    def model_state(self) -> str:
        return self.model.state.value if self.model is not None else "unavailable"

    def classify_comment(self, comment: Comment) -> ClassificationResult:
        """Rule-based chain for one comment, boosted by the model when READY."""
        text = comment.text
        verdict = classify(text, self.neutral_confidence)
        is_hate = verdict.sentiment is Sentiment.HATE

        result = ClassificationResult(
            comment=comment,
            verdict=verdict,
            speech_act=classify_speech_act(text, is_hate),
            violation=annotate_violation(text, is_hate),
            ite_violation=classify_ite_violation(text, is_hate),
        )
        return self._apply_model(result)

    def _apply_model(self, result: ClassificationResult) -> ClassificationResult:
        if self.model is None or not self.model.ready:
            return result

        prediction = self.model.classify(result.comment.text)
        if prediction is None:
            return result

        polarity = ClassifierConstants.MODEL_LABEL_MAP.get(prediction.label.lower())
        if polarity != result.sentiment.value or prediction.score < ClassifierConstants.MODEL_MIN_SCORE:
            return result

        confidence = round(min(ClassifierConstants.MAX_CONFIDENCE, prediction.score), 2)
        if confidence <= result.confidence:
            return result
        return replace(result, verdict=replace(result.verdict, confidence=confidence), source="model")

    def _apply_genai(self, result: ClassificationResult, payload: Optional[Dict[str, Any]]) -> ClassificationResult:
        if not isinstance(payload, dict):
            return result
        try:
            text = result.comment.text
            verdict = _merge_verdict(payload, result.verdict, text)
            rule = result
            if verdict.sentiment is not result.sentiment:
                # Fallback fields must agree with the merged sentiment
                is_hate = verdict.sentiment is Sentiment.HATE
                rule = replace(
                    result,
                    speech_act=classify_speech_act(text, is_hate),
                    violation=annotate_violation(text, is_hate),
                    ite_violation=classify_ite_violation(text, is_hate),
                )
            return replace(
                result,
                verdict=verdict,
                speech_act=_merge_speech_act(payload, rule.speech_act),
                violation=_merge_violation(payload, rule.violation),
                ite_violation=_merge_ite_violation(payload, rule.ite_violation),
                source="genai",
            )
        except Exception as e:
            logger.warning(f"Ignoring generative AI result for comment {result.comment.id}: {e}")
            return result

    def analyze(self, comments: Sequence[Union[Comment, Dict[str, Any]]],
                post: Optional[PostInfo] = None) -> AnalysisReport:
        """Run the full analysis over a batch of comments."""
        batch: List[Comment] = [
            c if isinstance(c, Comment) else Comment.from_dict(c, i)
            for i, c in enumerate(comments)
        ]
        logger.info(f"Analyzing {len(batch)} comments (model: {self.model_state})")

        results = [self.classify_comment(c) for c in batch]

        if self.genai is not None and getattr(self.genai, "available", False) and results:
            logger.info("Refining classifications with generative AI...")
            try:
                payloads = self.genai.analyze_comments([c.text for c in batch])
            except Exception as e:
                logger.warning(f"Generative AI analysis failed, keeping rule-based results: {e}")
                payloads = []
            results = [
                self._apply_genai(r, payloads[i] if i < len(payloads) else None)
                for i, r in enumerate(results)
            ]

        texts = [c.text for c in batch]
        return AnalysisReport(
            results=results,
            statistics=aggregate(results),
            categories=category_breakdown(results),
            speech_acts=speech_act_breakdown(results),
            ite_violations=ite_violation_breakdown(results),
            violations=summarize_violations(results),
            clusters=cluster(texts),
            entities=extract_entities(texts),
            threads=build_threads(results),
            post=post,
            model_state=self.model_state,
            generated_at=datetime.now().isoformat(),
        )
