"""Error Responses — every failure is a {"message"} body with the mapped status.

Invariants:
    - Store failures surface as 500 without internal details
    - Malformed JSON is a 400, not a 500
"""

from forum.api.dependencies import get_question_handlers, get_reply_handlers
from forum.core.errors import DatabaseError
from forum.main import app


class _BrokenStore:
    async def list_all(self):
        raise DatabaseError("Connection or operational error", "execute")

    async def delete(self, question_id):
        raise DatabaseError("Connection or operational error", "execute")

    async def list_for_question(self, question_id):
        raise DatabaseError("Connection or operational error", "execute")


async def test_list_questions_store_failure_returns_500(client):
    app.dependency_overrides[get_question_handlers] = lambda: _BrokenStore()
    res = await client.get("/questions")
    assert res.status_code == 500
    assert res.json() == {
        "message": "Database execute failed: Connection or operational error",
    }


async def test_delete_question_store_failure_returns_500(client):
    app.dependency_overrides[get_question_handlers] = lambda: _BrokenStore()
    res = await client.delete("/questions/anything")
    assert res.status_code == 500


async def test_list_replies_store_failure_returns_500(client):
    app.dependency_overrides[get_reply_handlers] = lambda: _BrokenStore()
    res = await client.get("/questions/anything/replies")
    assert res.status_code == 500


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/questions", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert "message" in res.json()
