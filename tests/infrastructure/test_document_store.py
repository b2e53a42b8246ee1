"""Document Store Adapter — typed find/insert/save/delete over a collection.

Invariants:
    - insert fills the generated id and column defaults
    - find matches by field equality; find_by_id misses cleanly on malformed ids
    - delete_by_id returns the removed document, or None
    - Duplicate unique keys raise ConflictError and leave the session usable
"""

from uuid import uuid4

import pytest

from forum.core.errors import ConflictError
from forum.infrastructure.document_store import DocumentCollection
from forum.models.question import Question
from forum.models.reply import Reply
from forum.models.user import User


@pytest.fixture
def questions(test_db):
    return DocumentCollection(test_db, Question)


async def test_insert_generates_id_and_defaults(questions):
    question = await questions.insert(Question(title="T", description="D"))
    assert question.id is not None
    assert question.resolved is False
    assert question.upvotes == 0
    assert question.created_at is not None


async def test_find_by_id_roundtrip(questions):
    question = await questions.insert(Question(title="T", description="D"))
    found = await questions.find_by_id(str(question.id))
    assert found is not None
    assert found.title == "T"


async def test_find_by_id_unknown_and_malformed(questions):
    assert await questions.find_by_id(uuid4()) is None
    assert await questions.find_by_id("garbage") is None


async def test_find_matches_fields(test_db):
    replies = DocumentCollection(test_db, Reply)
    target, other = uuid4(), uuid4()
    await replies.insert(Reply(content="a", question_id=target))
    await replies.insert(Reply(content="b", question_id=other))
    await replies.insert(Reply(content="c", question_id=target))

    found = await replies.find(question_id=target)
    assert sorted(r.content for r in found) == ["a", "c"]
    assert len(await replies.find()) == 3


async def test_find_one_returns_none_without_match(test_db):
    users = DocumentCollection(test_db, User)
    assert await users.find_one(email="nobody@example.com") is None


async def test_save_persists_changes(questions):
    question = await questions.insert(Question(title="T", description="D"))
    question.upvotes = 4
    await questions.save(question)
    assert (await questions.find_by_id(question.id)).upvotes == 4


async def test_delete_by_id(questions):
    question = await questions.insert(Question(title="T", description="D"))
    removed = await questions.delete_by_id(str(question.id))
    assert removed is not None
    assert removed.title == "T"
    assert await questions.find_by_id(question.id) is None
    assert await questions.delete_by_id(str(question.id)) is None


async def test_duplicate_unique_key_raises_conflict(test_db):
    users = DocumentCollection(test_db, User)
    await users.insert(User(
        first_name="A", last_name="B", email="dup@example.com", password="x",
    ))
    with pytest.raises(ConflictError):
        await users.insert(User(
            first_name="C", last_name="D", email="dup@example.com", password="y",
        ))
    # session rolled back and still usable
    assert len(await users.find(email="dup@example.com")) == 1


async def test_collection_name_is_table_name(test_db):
    assert DocumentCollection(test_db, Reply).name == "replies"
