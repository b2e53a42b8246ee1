"""Question Partial Update — absent keys untouched, falsy values applied.

Invariants:
    - Only resolved and upvotes are picked
    - resolved=False and upvotes=0 are real updates
    - Negative upvotes are accepted
    - The returned status reflects the resolved flag after the update
"""

from dataclasses import dataclass

from forum.core.domain_types import QuestionStatus
from forum.core.question_changes import apply_question_changes, pick_question_changes


@dataclass
class _Question:
    resolved: bool = False
    upvotes: int = 0
    title: str = "T"


def test_pick_ignores_unknown_keys():
    assert pick_question_changes({"title": "new", "upvotes": 3}) == {"upvotes": 3}


def test_pick_keeps_falsy_values():
    assert pick_question_changes({"resolved": False, "upvotes": 0}) == {
        "resolved": False, "upvotes": 0,
    }


def test_resolved_only_leaves_upvotes():
    q = _Question(upvotes=7)
    status = apply_question_changes(q, {"resolved": True})
    assert q.resolved is True
    assert q.upvotes == 7
    assert status == QuestionStatus.RESOLVED


def test_upvotes_only_leaves_resolved():
    q = _Question(resolved=True)
    status = apply_question_changes(q, {"upvotes": 2})
    assert q.resolved is True
    assert q.upvotes == 2
    assert status == QuestionStatus.RESOLVED


def test_negative_upvotes_accepted():
    q = _Question()
    apply_question_changes(q, {"upvotes": -5})
    assert q.upvotes == -5


def test_title_never_changes():
    q = _Question()
    apply_question_changes(q, {"title": "hijacked"})
    assert q.title == "T"


def test_unresolve_transition():
    q = _Question(resolved=True)
    assert apply_question_changes(q, {"resolved": False}) == QuestionStatus.UNRESOLVED
