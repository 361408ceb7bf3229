"""Topic clustering for comment batches."""

import logging
import re
from collections import Counter
from typing import Dict, List, Sequence

from .constants import ClusterConstants
from .lexicon import STOPWORDS, TOPIC_KEYWORDS
from .models import TopicCluster
from .text import lower, normalize

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\w+")


def _keyword_matches(pattern: str, token: str) -> bool:
    """Short patterns must equal the token, longer ones may sit inside it."""
    if len(pattern) <= ClusterConstants.MIN_TOKEN_LENGTH:
        return pattern == token
    return pattern in token


def _pattern_in_comment(pattern: str, tokens: Sequence[str]) -> bool:
    """Multi-word patterns match the joined tokens, single words a token."""
    if " " in pattern:
        return pattern in " ".join(tokens)
    return any(_keyword_matches(pattern, tok) for tok in tokens)


def _as_texts(comments: Sequence) -> List[str]:
    return [c if isinstance(c, str) else "" for c in (comments or [])]


def infer_topic_label(keywords: Sequence[str], default_label: str) -> str:
    """Name a cluster from its keywords.

    The first table topic with at least two matching keywords wins (one is
    enough for short keyword lists); otherwise the label is built from the
    leading keywords.
    """
    for topic, patterns in TOPIC_KEYWORDS.items():
        matches = sum(1 for kw in keywords if any(_keyword_matches(p, kw) for p in patterns))
        if matches >= ClusterConstants.MIN_LABEL_MATCHES or (
            matches == 1 and len(keywords) <= ClusterConstants.SHORT_KEYWORD_LIST
        ):
            return topic

    if keywords:
        return ClusterConstants.SYNTHESIZED_PREFIX + ", ".join(keywords[:ClusterConstants.LABEL_KEYWORDS])
    return default_label


def keyword_clusters(comments: Sequence[str]) -> List[TopicCluster]:
    """Bucket each comment under the table topic with the most keyword matches."""
    buckets: Dict[str, Dict] = {}

    for comment in _as_texts(comments):
        tokens = _WORD.findall(lower(comment))
        best_topic = None
        best_matches: List[str] = []

        for topic, patterns in TOPIC_KEYWORDS.items():
            matches = [p for p in patterns if _pattern_in_comment(p, tokens)]
            if len(matches) > len(best_matches):
                best_topic, best_matches = topic, matches

        if best_topic is None:
            best_topic = ClusterConstants.GENERAL_TOPIC
            best_matches = [
                tok for tok in tokens
                if len(tok) >= ClusterConstants.GENERAL_WORD_MIN_LENGTH and tok not in STOPWORDS
            ][:ClusterConstants.LABEL_KEYWORDS]

        bucket = buckets.setdefault(best_topic, {"comments": [], "keywords": {}})
        bucket["comments"].append(comment)
        for kw in best_matches:
            bucket["keywords"].setdefault(kw, None)

    clusters = [
        TopicCluster(
            id=idx,
            topic=topic,
            keywords=list(data["keywords"])[:ClusterConstants.MAX_KEYWORDS_PER_CLUSTER],
            comments=data["comments"][:ClusterConstants.MAX_SAMPLE_COMMENTS],
            count=len(data["comments"]),
        )
        for idx, (topic, data) in enumerate(buckets.items())
    ]
    clusters.sort(key=lambda c: -c.count)
    return clusters


def _frequency_clusters(comments: List[str]) -> List[TopicCluster]:
    docs = [doc for doc in (normalize(c) for c in comments) if doc]
    if len(docs) < ClusterConstants.MIN_COMMENTS:
        return []

    freq = Counter()
    for doc in docs:
        freq.update(doc.split())

    ranked = sorted(((w, n) for w, n in freq.items() if n > 1), key=lambda wn: -wn[1])
    candidates = [w for w, _ in ranked[:ClusterConstants.MAX_CANDIDATE_KEYWORDS]]

    num_topics = min(
        ClusterConstants.MAX_TOPICS,
        max(ClusterConstants.MIN_TOPICS, len(comments) // ClusterConstants.COMMENTS_PER_TOPIC),
    )
    size = len(candidates) // num_topics
    lowered = [lower(c) for c in comments]

    clusters = []
    for i in range(num_topics):
        topic_words = candidates[i * size:(i + 1) * size]
        if not topic_words:
            continue

        related = [
            comment for comment, low in zip(comments, lowered)
            if any(word in low for word in topic_words)
        ]
        if not related:
            continue

        clusters.append(TopicCluster(
            id=i,
            topic=infer_topic_label(topic_words, ClusterConstants.DEFAULT_LABEL.format(n=i + 1)),
            keywords=topic_words[:ClusterConstants.MAX_KEYWORDS_PER_CLUSTER],
            comments=related[:ClusterConstants.MAX_SAMPLE_COMMENTS],
            count=len(related),
        ))
    return clusters


def cluster(comments: Sequence[str]) -> List[TopicCluster]:
    """Group comments into labeled topic clusters.

    Term-frequency clustering needs at least three non-empty comments; small
    batches, empty results and any failure go to the keyword bucketer. Never
    raises.
    """
    texts = _as_texts(comments)
    if len(texts) < ClusterConstants.MIN_COMMENTS:
        return keyword_clusters(texts)

    try:
        clusters = _frequency_clusters(texts)
    except Exception as e:
        logger.warning(f"Frequency clustering failed, falling back to keyword buckets: {e}")
        return keyword_clusters(texts)

    if not clusters:
        logger.debug("Frequency clustering produced no clusters, using keyword buckets")
        return keyword_clusters(texts)
    return clusters
