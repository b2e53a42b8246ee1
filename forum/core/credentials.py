"""Credential Service — one-way password hashing and verification.

Invariants:
    - hash() is salted: same plaintext twice → two different digests, both verify
    - verify() returns False on mismatch, never raises for a wrong password
    - A malformed digest raises InternalError (stored data is corrupt, not a user error)
    - Plaintext is never logged

Design Decisions:
    - passlib CryptContext with bcrypt: constant-time compare and cost parameter built in
    - Synchronous API: callers in async code push it to a worker thread (bcrypt is CPU-bound)
"""

import logging

from passlib.context import CryptContext

from forum.core.errors import InternalError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class CredentialService:
    """bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return self._context.verify(plaintext, digest)
        except (ValueError, TypeError) as e:
            logger.error(f"Stored password digest is unusable: {e}")
            raise InternalError("Password digest could not be verified")
