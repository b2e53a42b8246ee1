"""Document Store Adapter — typed collection over one mapped entity.

Invariants:
    - One DocumentCollection wraps one model class and one AsyncSession
    - Records are keyed by generated UUIDs; an id that does not parse resolves to nothing
    - find() returns records in insertion order (created_at), no pagination
    - insert()/save()/delete_by_id() commit immediately: one logical write per call
    - A UNIQUE violation on insert becomes ConflictError; other store failures
      propagate to DatabaseSessionManager.session() and become DatabaseError

Design Decisions:
    - Generic over the model instead of one repository per entity: every route is a
      single find/insert/save/delete, so the three collections share one shape
    - Field-match filters (**match) instead of arbitrary expressions: the forum only
      ever queries by equality
"""

import logging
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.domain_types import parse_document_id
from forum.core.errors import ConflictError
from forum.db.base import Base

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=Base)


class DocumentCollection(Generic[DocumentT]):
    """Typed access to one collection of documents."""

    def __init__(self, db: AsyncSession, model: type[DocumentT]):
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def _query(self, match: dict[str, Any]):
        query = select(self.model)
        for field, value in match.items():
            query = query.where(getattr(self.model, field) == value)
        return query.order_by(self.model.created_at)

    async def find(self, **match: Any) -> list[DocumentT]:
        """All documents whose fields equal the given values."""
        result = await self.db.execute(self._query(match))
        return list(result.scalars().all())

    async def find_one(self, **match: Any) -> DocumentT | None:
        result = await self.db.execute(self._query(match).limit(1))
        return result.scalar_one_or_none()

    async def find_by_id(self, document_id: str | UUID) -> DocumentT | None:
        parsed = parse_document_id(document_id)
        if parsed is None:
            return None
        return await self.db.get(self.model, parsed)

    async def insert(self, document: DocumentT) -> DocumentT:
        """Persist a new document. Generated id and defaults are filled on return."""
        self.db.add(document)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Duplicate key in {self.name}: {e.orig}")
            raise ConflictError(
                f"Duplicate key in {self.name}", key=self.name,
            )
        await self.db.refresh(document)
        return document

    async def save(self, document: DocumentT) -> DocumentT:
        """Persist changes made to a loaded document."""
        await self.db.commit()
        await self.db.refresh(document)
        return document

    async def delete_by_id(self, document_id: str | UUID) -> DocumentT | None:
        """Remove and return the document, or None when the id resolves to nothing."""
        document = await self.find_by_id(document_id)
        if document is None:
            return None
        await self.db.delete(document)
        await self.db.commit()
        return document
