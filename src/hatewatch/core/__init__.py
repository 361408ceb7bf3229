"""Core modules for hatewatch."""

from .models import *
from .config import settings
from .classifier import classify, categorize, classify_ite_violation
from .violations import annotate_violation
from .speech_act import classify_speech_act
from .clustering import cluster
from .entities import extract_entities
from .scoring import aggregate, summarize_violations
from .threads import build_threads
from .pipeline import AnalysisPipeline

__all__ = [
    "settings",
    "Comment",
    "PostInfo",
    "Sentiment",
    "Neutral",
    "Positive",
    "Hate",
    "ClassificationResult",
    "AnalysisReport",
    "classify",
    "categorize",
    "classify_ite_violation",
    "annotate_violation",
    "classify_speech_act",
    "cluster",
    "extract_entities",
    "aggregate",
    "summarize_violations",
    "build_threads",
    "AnalysisPipeline",
]
