"""Credential Service — salted bcrypt hashing and safe verification.

Invariants:
    - The digest never equals the plaintext
    - Same plaintext twice → different digests, both verify
    - Wrong password → False (no exception)
    - Malformed digest → InternalError
"""

import pytest

from forum.core.credentials import DEFAULT_ROUNDS, CredentialService
from forum.core.errors import InternalError


def test_default_cost_factor_is_ten():
    assert DEFAULT_ROUNDS == 10
    assert CredentialService().rounds == 10


def test_hash_is_not_plaintext(credentials):
    digest = credentials.hash("s3cret")
    assert digest != "s3cret"
    assert digest.startswith("$2")


def test_hash_is_salted(credentials):
    first = credentials.hash("s3cret")
    second = credentials.hash("s3cret")
    assert first != second
    assert credentials.verify("s3cret", first)
    assert credentials.verify("s3cret", second)


def test_wrong_password_returns_false(credentials):
    digest = credentials.hash("s3cret")
    assert credentials.verify("guess", digest) is False


def test_cost_factor_is_encoded_in_digest(credentials):
    assert "$04$" in credentials.hash("s3cret")


def test_malformed_digest_raises_internal_error(credentials):
    with pytest.raises(InternalError):
        credentials.verify("s3cret", "not-a-bcrypt-digest")
