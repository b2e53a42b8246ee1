"""Question Handlers — list, create, partial update, delete.

Invariants:
    - create requires non-empty title and description; resolved/upvotes start at False/0
    - update touches only resolved/upvotes keys that are present (absence != reset)
    - update and delete raise NotFoundError for ids that resolve to nothing
    - delete does NOT cascade: replies of a deleted question stay in the store
    - Each method issues one read and at most one write; no locking (last write wins)
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.enforce_fields import check_required
from forum.core.errors import NotFoundError
from forum.core.question_changes import apply_question_changes
from forum.infrastructure.document_store import DocumentCollection
from forum.models.question import Question

logger = logging.getLogger(__name__)


class QuestionHandlers:
    """CRUD over the questions collection."""

    def __init__(self, db: AsyncSession):
        self.questions = DocumentCollection(db, Question)

    async def list_all(self) -> list[Question]:
        return await self.questions.find()

    async def create(self, title: str | None, description: str | None) -> Question:
        check_required("Question", {"title": title, "description": description})
        question = await self.questions.insert(
            Question(title=title, description=description),
        )
        logger.info("Question created", extra={"question_id": str(question.id)})
        return question

    async def update(self, question_id: str, changes: Mapping[str, Any]) -> Question:
        question = await self.questions.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        status = apply_question_changes(question, changes)
        await self.questions.save(question)
        logger.info(
            f"Question updated ({status.value}, {question.upvotes} upvotes)",
            extra={"question_id": str(question.id)},
        )
        return question

    async def delete(self, question_id: str) -> Question:
        question = await self.questions.delete_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        logger.info("Question deleted", extra={"question_id": str(question.id)})
        return question
