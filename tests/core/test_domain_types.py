"""Domain Types — identifier parsing and question lifecycle enum."""

from uuid import uuid4

from forum.core.domain_types import (
    QuestionStatus, parse_document_id,
)


def test_parse_accepts_uuid_string_and_instance():
    uid = uuid4()
    assert parse_document_id(str(uid)) == uid
    assert parse_document_id(uid) == uid


def test_parse_malformed_id_returns_none():
    assert parse_document_id("not-an-id") is None
    assert parse_document_id("") is None
    assert parse_document_id("507f1f77bcf86cd799439011") is None


def test_question_status_has_two_states():
    assert set(QuestionStatus) == {QuestionStatus.UNRESOLVED, QuestionStatus.RESOLVED}
    assert QuestionStatus.from_flag(True) == QuestionStatus.RESOLVED
    assert QuestionStatus.from_flag(False) == QuestionStatus.UNRESOLVED
    assert QuestionStatus.RESOLVED.value == "resolved"
