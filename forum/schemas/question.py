"""Question Schemas — create/update bodies and the serialized question.

Invariants:
    - QuestionCreate requires non-empty title and description
    - QuestionUpdate distinguishes absent from present: only keys sent by the client
      appear in changes(); explicit null is rejected
    - Unknown keys in a PATCH body are ignored
    - upvotes must fit a signed 64-bit column; anything wider is a 400, not a store error
    - Question ids are serialized as "_id"
"""

from uuid import UUID

from pydantic import Field, model_validator

from forum.schemas.base import ForumSchema, document_id_field

UPVOTES_MIN = -(2**63)
UPVOTES_MAX = 2**63 - 1


class QuestionCreate(ForumSchema):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)


class QuestionUpdate(ForumSchema):
    """Partial update. resolved and upvotes are independent."""
    resolved: bool | None = None
    upvotes: int | None = Field(None, ge=UPVOTES_MIN, le=UPVOTES_MAX)

    @model_validator(mode="after")
    def reject_explicit_null(self):
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class QuestionRead(ForumSchema):
    id: UUID = document_id_field()
    title: str
    description: str
    resolved: bool
    upvotes: int


class QuestionEnvelope(ForumSchema):
    message: str
    question: QuestionRead
