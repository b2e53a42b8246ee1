"""User Handlers — signup and login.

Invariants:
    - signup requires all four fields; a taken email raises ConflictError
    - The stored password is always a digest; plaintext is never persisted or logged
    - login raises the SAME AuthError for unknown email and wrong password
    - login returns the stored user record, digest included

Design Decisions:
    - Hash/verify run in a worker thread: bcrypt would otherwise stall the event loop
    - Check-then-write for email uniqueness; the UNIQUE constraint catches the race
      and the store adapter reports it as ConflictError too
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from forum.core.credentials import CredentialService
from forum.core.enforce_fields import check_required
from forum.core.errors import AuthError, ConflictError
from forum.infrastructure.document_store import DocumentCollection
from forum.models.user import User

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already in use"


class UserHandlers:
    """Registration and credential checks over the users collection."""

    def __init__(self, db: AsyncSession, credentials: CredentialService):
        self.users = DocumentCollection(db, User)
        self.credentials = credentials

    async def signup(
        self,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        password: str | None,
    ) -> User:
        check_required("User", {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "password": password,
        })
        if await self.users.find_one(email=email) is not None:
            raise ConflictError(EMAIL_TAKEN, key="email")

        digest = await run_in_threadpool(self.credentials.hash, password)
        user = User(
            first_name=first_name, last_name=last_name,
            email=email, password=digest,
        )
        try:
            user = await self.users.insert(user)
        except ConflictError:
            raise ConflictError(EMAIL_TAKEN, key="email")
        logger.info("User registered", extra={"email": email})
        return user

    async def login(self, email: str | None, password: str | None) -> User:
        if not email or not password:
            raise AuthError()
        user = await self.users.find_one(email=email)
        if user is None:
            logger.info("Login failed: unknown email", extra={"email": email})
            raise AuthError()
        if not await run_in_threadpool(self.credentials.verify, password, user.password):
            logger.info("Login failed: wrong password", extra={"email": email})
            raise AuthError()
        return user
