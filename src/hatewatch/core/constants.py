"""Constants and configuration values for hatewatch."""

# Classification Constants
class ClassifierConstants:
    """Constants for the rule-based comment classifier."""

    BASE_CONFIDENCE = 0.6  # confidence floor for a keyword hit
    CONFIDENCE_STEP = 0.1  # added per matched keyword
    MAX_CONFIDENCE = 0.9  # keyword confidence ceiling

    DEFAULT_CATEGORY = "Lainnya (Negatif)"

    # Subtypes that mark a speech act as aggressive
    AGGRESSIVE_SUBTYPE_MARKERS = (
        "Tuduhan",
        "Ancaman",
        "Balas Dendam",
        "Penghinaan",
        "Diskriminatif",
    )

    # Local model labels mapped onto sentiment values
    MODEL_LABEL_MAP = {
        "positive": "positive",
        "negative": "hate",
        "neutral": "neutral",
        "label_0": "positive",
        "label_1": "hate",
        "label_2": "neutral",
    }
    MODEL_MIN_SCORE = 0.6  # model predictions below this never adjust confidence
    MODEL_MAX_CHARS = 512  # characters passed to the local model

# Topic Clustering Constants
class ClusterConstants:
    """Constants for topic clustering."""

    MIN_COMMENTS = 3  # below this the keyword bucketer is used directly
    MIN_TOKEN_LENGTH = 3  # tokens shorter than this are dropped by normalize()
    MAX_CANDIDATE_KEYWORDS = 20  # frequency-ranked keywords kept
    COMMENTS_PER_TOPIC = 8  # divisor for the number of topics
    MIN_TOPICS = 2
    MAX_TOPICS = 5
    MAX_KEYWORDS_PER_CLUSTER = 5
    MAX_SAMPLE_COMMENTS = 3
    MIN_LABEL_MATCHES = 2  # keywords needed to adopt a named topic label
    SHORT_KEYWORD_LIST = 3  # one match is enough at or below this many keywords
    LABEL_KEYWORDS = 3  # keywords joined into a synthesized label

    GENERAL_TOPIC = "Diskusi Umum"
    SYNTHESIZED_PREFIX = "Diskusi: "
    DEFAULT_LABEL = "Topik {n}"
    GENERAL_WORD_MIN_LENGTH = 4  # words kept as keywords of the general bucket

# Scraping Constants
class ScrapeConstants:
    """Constants related to Apify scraping."""

    APIFY_BASE_URL = "https://api.apify.com/v2/acts"
    DEFAULT_RESULTS_LIMIT = 10
    MAX_RESULTS_LIMIT = 500
    MAX_POST_TITLE_LENGTH = 100
    FACEBOOK_URL_PATTERN = r"^https?://(?:www\.|m\.|web\.)?facebook\.com/\S+"

# Prompt Constants
class PromptConstants:
    """Constants for generative AI prompts."""

    PROMPT_VERSION = "v1.2"  # bump to invalidate cached responses
    TEMPERATURE = 0.2
    MAX_TOKENS = 1024

# Cache Constants
class CacheConstants:
    """Constants for caching behavior."""

    CACHE_TTL_HOURS = 24  # cache time-to-live in hours
    CACHE_KEY_LENGTH = 8  # length of cache key for logging

# Error Handling Constants
class ErrorConstants:
    """Constants for error handling and retries."""

    REQUEST_TIMEOUT = 60  # timeout for generative AI requests
    MAX_ERROR_BODY = 300  # characters of an error response kept in messages

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
    MAX_THREAD_DEPTH = 50  # deeper replies are listed under the reply at this depth
