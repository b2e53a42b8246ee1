"""ORM Models — SQLAlchemy declarative models for the three forum collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every record is keyed by a generated UUID and stamped with created_at

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from forum.models.user import User  # noqa: F401
from forum.models.question import Question  # noqa: F401
from forum.models.reply import Reply  # noqa: F401
