"""Services for hatewatch."""

from .apify_client import ApifyService
from .llm import GenAIServiceFactory
from .model import TextClassifierCapability

__all__ = [
    "ApifyService",
    "GenAIServiceFactory",
    "TextClassifierCapability",
]
