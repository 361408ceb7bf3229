"""Data models for hatewatch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Tuple, Union


class Sentiment(Enum):
    HATE = "hate"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}


class SpeechActType(Enum):
    ASSERTIVE = "assertive"
    DIRECTIVE = "directive"
    COMMISSIVE = "commissive"
    EXPRESSIVE = "expressive"
    DECLARATIVE = "declarative"


class EntityType(Enum):
    PRONOUN = "pronoun"
    PERSON = "person"
    GROUP = "group"


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _to_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Attachment:
    """Media or link attached to a comment."""
    type: str
    url: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Comment:
    """A single scraped comment."""
    id: str
    author: str
    text: str
    timestamp: str
    likes: int = 0
    replies: int = 0
    parent_id: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], index: int = 0) -> "Comment":
        """Build a comment from loosely-typed data, coercing bad fields to defaults."""
        raw = raw if isinstance(raw, dict) else {}
        text = raw.get("text")
        attachments = []
        for item in raw.get("attachments") or []:
            if isinstance(item, dict) and item.get("url"):
                attachments.append(Attachment(
                    type=_to_str(item.get("type"), "link"),
                    url=_to_str(item.get("url")),
                    description=item.get("description"),
                ))
        parent_id = raw.get("parent_id", raw.get("parentId"))
        return cls(
            id=_to_str(raw.get("id"), f"comment_{index}") or f"comment_{index}",
            author=_to_str(raw.get("author"), f"User {index + 1}") or f"User {index + 1}",
            text=text if isinstance(text, str) else "",
            timestamp=_to_str(raw.get("timestamp")),
            likes=_to_int(raw.get("likes")),
            replies=_to_int(raw.get("replies")),
            parent_id=_to_str(parent_id) if parent_id else None,
            attachments=tuple(attachments),
        )


@dataclass(frozen=True)
class PostInfo:
    """Metadata of the scraped post."""
    title: str
    content: str
    author: str
    timestamp: str
    likes: int = 0
    shares: int = 0


# Sentiment verdicts: exactly one of these per comment.

@dataclass(frozen=True)
class Neutral:
    confidence: float

    sentiment = Sentiment.NEUTRAL


@dataclass(frozen=True)
class Positive:
    confidence: float

    sentiment = Sentiment.POSITIVE


@dataclass(frozen=True)
class Hate:
    confidence: float
    category: str

    sentiment = Sentiment.HATE


Verdict = Union[Neutral, Positive, Hate]


@dataclass(frozen=True)
class SpeechAct:
    """Speech-act classification of a comment."""
    type: SpeechActType
    subtype: str


@dataclass(frozen=True)
class IteViolation:
    """Single ITE violation type assigned to a comment."""
    type: str  # defamation, blasphemy, incitement, hoax, unpleasant_acts
    label: str


@dataclass(frozen=True)
class UiteViolation:
    """UU ITE articles a comment potentially violates."""
    articles: Tuple[str, ...]
    severity: Severity
    description: str

    @property
    def has_violation(self) -> bool:
        return len(self.articles) > 0


@dataclass(frozen=True)
class ClassificationResult:
    """Full classification of one comment."""
    comment: Comment
    verdict: Verdict
    speech_act: SpeechAct
    violation: UiteViolation
    ite_violation: Optional[IteViolation] = None
    source: str = "lexicon"  # lexicon, model or genai

    @property
    def sentiment(self) -> Sentiment:
        return self.verdict.sentiment

    @property
    def confidence(self) -> float:
        return self.verdict.confidence

    @property
    def category(self) -> Optional[str]:
        return self.verdict.category if isinstance(self.verdict, Hate) else None


@dataclass(frozen=True)
class TopicCluster:
    """Comments grouped under one topic label."""
    id: int
    topic: str
    keywords: List[str]
    comments: List[str]
    count: int


@dataclass
class EntityTarget:
    """Pronoun, person or group mentioned across a batch."""
    entity: str
    type: EntityType
    mentions: int = 0
    comments: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Statistics:
    """Corpus-level sentiment counts."""
    total: int
    hate: int
    neutral: int
    positive: int
    hate_percentage: int
    neutral_percentage: int
    positive_percentage: int


@dataclass(frozen=True)
class ViolationSummary:
    """Corpus-level UU ITE violation counts."""
    total_comments: int
    total_violations: int
    violation_percentage: int
    by_severity: Dict[str, int]
    article_counts: Dict[str, int]


@dataclass
class CommentThread:
    """A classified comment and its classified replies."""
    result: ClassificationResult
    replies: List["CommentThread"] = field(default_factory=list)


@dataclass
class AnalysisReport:
    """Everything produced by one analysis run."""
    results: List[ClassificationResult]
    statistics: Statistics
    categories: Dict[str, int]
    speech_acts: Dict[str, int]
    ite_violations: Dict[str, int]
    violations: ViolationSummary
    clusters: List[TopicCluster]
    entities: List[EntityTarget]
    threads: List[CommentThread]
    post: Optional[PostInfo] = None
    model_state: str = "unavailable"
    generated_at: Optional[str] = None
