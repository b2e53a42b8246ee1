"""Request Dependencies — build per-request handlers from injected collaborators.

Invariants:
    - Handlers receive their store session and credential service explicitly
    - CredentialService is built once per cost factor (CryptContext setup is not free)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import Settings, get_settings
from forum.core.credentials import CredentialService
from forum.infrastructure.database import get_db
from forum.services.handle_questions import QuestionHandlers
from forum.services.handle_replies import ReplyHandlers
from forum.services.handle_users import UserHandlers


@lru_cache
def _credential_service(rounds: int) -> CredentialService:
    return CredentialService(rounds=rounds)


def get_credentials(
    settings: Settings = Depends(get_settings),
) -> CredentialService:
    return _credential_service(settings.bcrypt_rounds)


def get_question_handlers(
    db: AsyncSession = Depends(get_db),
) -> QuestionHandlers:
    return QuestionHandlers(db)


def get_reply_handlers(db: AsyncSession = Depends(get_db)) -> ReplyHandlers:
    return ReplyHandlers(db)


def get_user_handlers(
    db: AsyncSession = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
) -> UserHandlers:
    return UserHandlers(db, credentials)
