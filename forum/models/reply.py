"""Reply ORM — an answer posted under a question.

Invariants:
    - id is a generated UUID primary key
    - content is non-nullable text
    - question_id is required and indexed, but carries NO foreign key constraint:
      the question may be deleted later and its replies stay

Design Decisions:
    - Existence of the question is checked by the handler at creation time only
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class Reply(Base):
    __tablename__ = "replies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
