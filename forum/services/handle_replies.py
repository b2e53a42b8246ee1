"""Reply Handlers — add a reply to a question, list a question's replies.

Invariants:
    - add raises NotFoundError when the question does not exist at call time
    - add requires non-empty content
    - list_for_question NEVER raises for unknown or malformed ids: it returns []
      (deliberately asymmetric with add)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.domain_types import parse_document_id
from forum.core.enforce_fields import check_required
from forum.core.errors import NotFoundError
from forum.infrastructure.document_store import DocumentCollection
from forum.models.question import Question
from forum.models.reply import Reply

logger = logging.getLogger(__name__)


class ReplyHandlers:
    """Replies scoped to a question."""

    def __init__(self, db: AsyncSession):
        self.questions = DocumentCollection(db, Question)
        self.replies = DocumentCollection(db, Reply)

    async def add(self, question_id: str, content: str | None) -> Reply:
        question = await self.questions.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        check_required("Reply", {"content": content})
        reply = await self.replies.insert(
            Reply(content=content, question_id=question.id),
        )
        logger.info(
            "Reply added",
            extra={"question_id": str(question.id), "reply_id": str(reply.id)},
        )
        return reply

    async def list_for_question(self, question_id: str) -> list[Reply]:
        parsed = parse_document_id(question_id)
        if parsed is None:
            return []
        return await self.replies.find(question_id=parsed)
