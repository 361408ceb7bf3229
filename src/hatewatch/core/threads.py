"""Nest classified comments into reply threads."""

from typing import Dict, List, Optional, Sequence

from .models import ClassificationResult, CommentThread


def _in_cycle(parents: Dict[str, Optional[str]], comment_id: str) -> bool:
    seen = set()
    current = parents.get(comment_id)
    while current is not None and current not in seen:
        if current == comment_id:
            return True
        seen.add(current)
        current = parents.get(current)
    return False


def build_threads(results: Sequence[ClassificationResult]) -> List[CommentThread]:
    """Attach replies under their parent comment.

    A result whose parent is missing from the batch (or whose parent chain
    loops back to it) becomes a root, so no comment is dropped.
    """
    nodes: Dict[str, CommentThread] = {}
    parents: Dict[str, Optional[str]] = {}
    for r in results:
        if r.comment.id not in nodes:
            nodes[r.comment.id] = CommentThread(result=r)
            parents[r.comment.id] = r.comment.parent_id

    roots = []
    for r in results:
        node = nodes[r.comment.id]
        if node.result is not r:
            # duplicate id
            roots.append(CommentThread(result=r))
            continue
        parent = nodes.get(r.comment.parent_id) if r.comment.parent_id else None
        if parent is None or _in_cycle(parents, r.comment.id):
            roots.append(node)
        else:
            parent.replies.append(node)
    return roots
