"""Question ORM — a forum thread opener with a resolved flag and a vote count.

Invariants:
    - id is a generated UUID primary key
    - title and description are non-nullable text
    - resolved defaults to False, upvotes defaults to 0
    - upvotes is NOT sign-checked (negative totals are stored as given); 64-bit range

Design Decisions:
    - No relationship() to Reply: replies point here by a plain column and
      survive deletion of their question
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Boolean, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    resolved: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    upvotes: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
