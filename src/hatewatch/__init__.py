"""hatewatch - hate-speech and UU ITE analysis of Facebook comments."""

__version__ = "1.0.0"
__author__ = "hatewatch Team"

from .core.models import *
from .core.config import settings
from .core.pipeline import AnalysisPipeline
from .services.apify_client import ApifyService
from .services.llm import GenAIServiceFactory
from .services.model import TextClassifierCapability

__all__ = [
    "settings",
    "AnalysisPipeline",
    "ApifyService",
    "GenAIServiceFactory",
    "TextClassifierCapability",
]
