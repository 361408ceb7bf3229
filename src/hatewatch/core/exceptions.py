"""Exceptions shared across hatewatch.

- InvalidPostUrlError : the URL is not a Facebook post link
- ScrapeError         : the scraping API call failed
- GenAIError          : generative AI call or response parsing failed
"""


class HatewatchError(Exception):
    """Base class for hatewatch errors."""
    pass


class InvalidPostUrlError(HatewatchError, ValueError):
    """URL is not a Facebook post link."""
    pass


class ScrapeError(HatewatchError, RuntimeError):
    """Apify request failed or returned an error status."""
    pass


class GenAIError(HatewatchError, RuntimeError):
    """Generative AI request, response format or parsing failed."""
    pass
