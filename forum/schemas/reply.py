"""Reply Schemas — add-reply body and the serialized reply.

Invariants:
    - ReplyCreate checks types only; presence of content is left to
      ReplyHandlers.add so an unknown question is a 404 before a missing
      content is a 400
"""

from uuid import UUID

from forum.schemas.base import ForumSchema, document_id_field


class ReplyCreate(ForumSchema):
    content: str | None = None


class ReplyRead(ForumSchema):
    id: UUID = document_id_field()
    content: str
    question_id: UUID


class ReplyEnvelope(ForumSchema):
    message: str
    reply: ReplyRead
