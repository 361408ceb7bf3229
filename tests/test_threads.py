"""Tests for reply thread building."""

import pytest
from hatewatch.core.models import (
    ClassificationResult, Comment, Neutral, Severity, SpeechAct, SpeechActType, UiteViolation,
)
from hatewatch.core.threads import build_threads


def make_result(comment_id, parent_id=None):
    return ClassificationResult(
        comment=Comment(id=comment_id, author="u", text="t", timestamp="", parent_id=parent_id),
        verdict=Neutral(0.7),
        speech_act=SpeechAct(SpeechActType.ASSERTIVE, "Pernyataan Fakta/Pendapat"),
        violation=UiteViolation(articles=(), severity=Severity.LOW, description="-"),
    )


def ids(threads):
    return [t.result.comment.id for t in threads]


def test_replies_nest_under_parent():
    results = [make_result("1"), make_result("2", "1"), make_result("3"), make_result("4", "2")]
    roots = build_threads(results)
    assert ids(roots) == ["1", "3"]
    assert ids(roots[0].replies) == ["2"]
    assert ids(roots[0].replies[0].replies) == ["4"]


def test_reply_before_parent_still_nests():
    roots = build_threads([make_result("2", "1"), make_result("1")])
    assert ids(roots) == ["1"]
    assert ids(roots[0].replies) == ["2"]


def test_orphan_becomes_root():
    roots = build_threads([make_result("1"), make_result("2", "missing")])
    assert ids(roots) == ["1", "2"]


def test_cycles_become_roots():
    roots = build_threads([make_result("a", "b"), make_result("b", "a"), make_result("c", "c")])
    assert sorted(ids(roots)) == ["a", "b", "c"]


def test_duplicate_ids_are_not_dropped():
    roots = build_threads([make_result("1"), make_result("1")])
    assert len(roots) == 2


def test_empty():
    assert build_threads([]) == []


if __name__ == "__main__":
    pytest.main([__file__])
