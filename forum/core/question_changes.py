"""Question Partial Update — selects and applies the fields a PATCH may change.

Invariants:
    - Only resolved and upvotes are updatable; every other key is ignored
    - A key absent from the request leaves the stored value untouched (absence != reset)
    - upvotes accepts any integer, negative included

Design Decisions:
    - Presence is decided by the caller (schema exclude_unset), not by truthiness:
      resolved=False and upvotes=0 are real updates
"""

from collections.abc import Mapping
from typing import Any, Protocol

from forum.core.domain_types import QuestionStatus

UPDATABLE_FIELDS = ("resolved", "upvotes")


class QuestionLike(Protocol):
    """Structural contract for the attributes a partial update touches."""
    resolved: bool
    upvotes: int


def pick_question_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the updatable keys that are explicitly present."""
    return {key: changes[key] for key in UPDATABLE_FIELDS if key in changes}


def apply_question_changes(
    question: QuestionLike, changes: Mapping[str, Any],
) -> QuestionStatus:
    """Apply picked changes in place. Returns the resulting lifecycle status."""
    for key, value in pick_question_changes(changes).items():
        setattr(question, key, value)
    return QuestionStatus.from_flag(question.resolved)
