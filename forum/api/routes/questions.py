"""Question Routes — list, create, update and delete questions.

Invariants:
    - Bodies are validated by pydantic before the handler runs
    - PATCH forwards only the keys the client sent
    - Failures are raised, never returned: error_handlers.py serializes them
"""

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_question_handlers
from forum.schemas.base import MessageResponse
from forum.schemas.question import (
    QuestionCreate, QuestionEnvelope, QuestionRead, QuestionUpdate,
)
from forum.services.handle_questions import QuestionHandlers

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("", response_model=list[QuestionRead])
async def list_questions(
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """All questions, oldest first."""
    return await handlers.list_all()


@router.post(
    "", response_model=QuestionEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    body: QuestionCreate,
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    question = await handlers.create(body.title, body.description)
    return QuestionEnvelope(
        message="Question created successfully!",
        question=QuestionRead.model_validate(question),
    )


@router.patch("/{question_id}", response_model=QuestionEnvelope)
async def update_question(
    question_id: str,
    body: QuestionUpdate,
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Set resolved and/or upvotes. Omitted fields keep their value."""
    question = await handlers.update(question_id, body.changes())
    return QuestionEnvelope(
        message="Question updated successfully!",
        question=QuestionRead.model_validate(question),
    )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Delete a question. Its replies are left in place."""
    await handlers.delete(question_id)
    return MessageResponse(message="Question deleted successfully!")
