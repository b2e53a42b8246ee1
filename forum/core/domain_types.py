"""Domain Types — identifier parsing and the question lifecycle.

Invariants:
    - A raw identifier that is not a UUID resolves to no record (parse_document_id → None)
    - Question lifecycle encoded as an Enum — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from uuid import UUID


# ─── Identifiers ─────────────────────────────────────────────────

def parse_document_id(raw: str | UUID) -> UUID | None:
    """Parse a path identifier. Malformed input is not an error, just a miss."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None


# ─── Enums ───────────────────────────────────────────────────────

class QuestionStatus(str, Enum):
    """Question lifecycle. Only an explicit update moves between states."""
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"

    @classmethod
    def from_flag(cls, resolved: bool) -> "QuestionStatus":
        return cls.RESOLVED if resolved else cls.UNRESOLVED
