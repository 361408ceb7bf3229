"""Text normalization for topic clustering."""

import re

from .constants import ClusterConstants
from .lexicon import STOPWORDS

_NON_WORD = re.compile(r"[^\w\s]")
_DIGITS = re.compile(r"\d+")


def normalize(text) -> str:
    """Lowercase, strip punctuation and digits, drop short tokens and stopwords.

    Only clustering works on this token stream; the classifiers scan the
    lowercased unmodified text.
    """
    if not isinstance(text, str) or not text:
        return ""
    cleaned = _DIGITS.sub("", _NON_WORD.sub(" ", text.lower()))
    tokens = [
        tok for tok in cleaned.split()
        if len(tok) >= ClusterConstants.MIN_TOKEN_LENGTH and tok not in STOPWORDS
    ]
    return " ".join(tokens)


def lower(text) -> str:
    """Lowercased text, or an empty string for non-string input."""
    return text.lower() if isinstance(text, str) else ""
