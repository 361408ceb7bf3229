"""Data preparation for export."""

import datetime
import json
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.lexicon import ARTICLE_LABELS
from ..core.models import AnalysisReport, ClassificationResult, CommentThread, Comment


def _comment_dict(comment: Comment) -> Dict[str, Any]:
    return {
        "id": comment.id,
        "author": comment.author,
        "text": comment.text,
        "timestamp": comment.timestamp,
        "likes": comment.likes,
        "replies": comment.replies,
        "parent_id": comment.parent_id,
        "attachments": [
            {"type": a.type, "url": a.url, "description": a.description}
            for a in comment.attachments
        ],
    }


def _result_dict(result: ClassificationResult) -> Dict[str, Any]:
    violation = result.violation
    return {
        "comment": _comment_dict(result.comment),
        "sentiment": result.sentiment.value,
        "confidence": result.confidence,
        "category": result.category,
        "speech_act": {
            "type": result.speech_act.type.value,
            "subtype": result.speech_act.subtype,
        },
        "ite_violation": (
            {"type": result.ite_violation.type, "label": result.ite_violation.label}
            if result.ite_violation else None
        ),
        "uite_violation": {
            "has_violation": violation.has_violation,
            "articles": list(violation.articles),
            "article_labels": [ARTICLE_LABELS.get(a, a) for a in violation.articles],
            "severity": violation.severity.value,
            "description": violation.description,
        },
        "source": result.source,
    }


def _thread_node(thread: CommentThread) -> Dict[str, Any]:
    return {
        "id": thread.result.comment.id,
        "sentiment": thread.result.sentiment.value,
        "replies": [],
    }


def _thread_dict(thread: CommentThread) -> Dict[str, Any]:
    """Nested reply tree, built without recursion.

    Nesting stops at MAX_THREAD_DEPTH; replies below that depth are listed
    flat under the deepest exported reply.
    """
    root = _thread_node(thread)
    stack = [(thread, root, 0)]
    while stack:
        current, node, depth = stack.pop()
        for reply in current.replies:
            child = _thread_node(reply)
            node["replies"].append(child)
            if depth < FileConstants.MAX_THREAD_DEPTH:
                stack.append((reply, child, depth + 1))
            else:
                stack.append((reply, node, depth))
    return root


def prepare_export(report: AnalysisReport) -> Dict[str, Any]:
    """Prepare an analysis report for JSON export."""
    stats = report.statistics
    violations = report.violations

    post_data = None
    if report.post is not None:
        post = report.post
        post_data = {
            "title": post.title,
            "content": post.content,
            "author": post.author,
            "timestamp": post.timestamp,
            "likes": post.likes,
            "shares": post.shares,
        }

    results: List[Dict[str, Any]] = [_result_dict(r) for r in report.results]

    export_data = {
        "post": post_data,
        "statistics": {
            "total": stats.total,
            "hate": stats.hate,
            "neutral": stats.neutral,
            "positive": stats.positive,
            "hate_percentage": stats.hate_percentage,
            "neutral_percentage": stats.neutral_percentage,
            "positive_percentage": stats.positive_percentage,
        },
        "categories": report.categories,
        "speech_acts": report.speech_acts,
        "ite_violations": report.ite_violations,
        "uite_summary": {
            "total_comments": violations.total_comments,
            "total_violations": violations.total_violations,
            "violation_percentage": violations.violation_percentage,
            "by_severity": violations.by_severity,
            "article_counts": violations.article_counts,
        },
        "clusters": [
            {
                "id": c.id,
                "topic": c.topic,
                "keywords": c.keywords,
                "comments": c.comments,
                "count": c.count,
            }
            for c in report.clusters
        ],
        "entities": [
            {
                "entity": e.entity,
                "type": e.type.value,
                "mentions": e.mentions,
                "comments": e.comments,
            }
            for e in report.entities
        ],
        "threads": [_thread_dict(t) for t in report.threads],
        "results": results,
        "metadata": {
            "generated_at": report.generated_at,
            "model_state": report.model_state,
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
