"""Reply Routes — replies nested under /questions/{question_id}.

Invariants:
    - POST on an unknown question → 404
    - GET on an unknown question → 200 with []
"""

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_reply_handlers
from forum.schemas.reply import ReplyCreate, ReplyEnvelope, ReplyRead
from forum.services.handle_replies import ReplyHandlers

router = APIRouter(prefix="/questions/{question_id}/replies", tags=["replies"])


@router.post(
    "", response_model=ReplyEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    question_id: str,
    body: ReplyCreate,
    handlers: ReplyHandlers = Depends(get_reply_handlers),
):
    reply = await handlers.add(question_id, body.content)
    return ReplyEnvelope(
        message="Reply added successfully!",
        reply=ReplyRead.model_validate(reply),
    )


@router.get("", response_model=list[ReplyRead])
async def list_replies(
    question_id: str,
    handlers: ReplyHandlers = Depends(get_reply_handlers),
):
    return await handlers.list_for_question(question_id)
