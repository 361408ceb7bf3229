"""Configuration management for hatewatch."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Apify scraping API
    apify_token: str = Field("", description="Apify API token")
    apify_actor: str = Field("apify~facebook-comments-scraper", description="Apify actor used for comment scraping")
    apify_timeout: float = Field(120.0, description="Timeout in seconds for a synchronous Apify run")
    apify_include_nested: bool = Field(False, description="Ask the actor for nested reply comments")

    # Generative AI (Gemini through its OpenAI-compatible endpoint)
    genai_api_key: str = Field("", description="Generative AI API key")
    gemini_api_key: str = Field("", description="Gemini API key (alternative naming)")
    genai_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta/openai/",
        description="Base URL of the OpenAI-compatible generative AI endpoint",
    )
    genai_model: str = Field("gemini-2.0-flash", description="Generative AI model name")
    genai_batch_size: int = Field(5, description="Comments sent to the generative AI concurrently")

    @property
    def effective_genai_key(self) -> str:
        """Get the effective generative AI key from either field."""
        return self.genai_api_key or self.gemini_api_key

    # Local text-classification model
    enable_model: bool = Field(False, description="Load the transformers text-classification model")
    model_name: str = Field(
        "distilbert-base-uncased-finetuned-sst-2-english",
        description="Hugging Face model used by the text-classification pipeline",
    )

    # Classification
    neutral_confidence: float = Field(0.7, description="Confidence assigned to neutral verdicts in a batch")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Retries and caching
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")
    cache_dir: str = Field(".cache/genai", description="Directory for cached generative AI responses")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        protected_namespaces = ()


# Global settings instance
settings = Settings()
