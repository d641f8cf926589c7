"""Unit tests for bcrypt password hashing."""

import pytest

from messagely.core.config import Settings
from messagely.core.exceptions import InvalidPasswordError
from messagely.services.password_hasher import MAX_PASSWORD_BYTES, PasswordHasher


@pytest.fixture
def hasher():
    return PasswordHasher(Settings(BCRYPT_WORK_FACTOR=4))


def test_hash_then_verify(hasher):
    digest = hasher.hash("correct horse")
    assert hasher.verify("correct horse", digest) is True


def test_wrong_password_does_not_verify(hasher):
    digest = hasher.hash("correct horse")
    assert hasher.verify("battery staple", digest) is False


def test_hash_is_salted(hasher):
    assert hasher.hash("same") != hasher.hash("same")


def test_hash_never_contains_plaintext(hasher):
    assert "hunter2" not in hasher.hash("hunter2")


def test_work_factor_is_encoded_in_digest(hasher):
    assert hasher.hash("pw").startswith("$2b$04$")


@pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$04$short", None])
def test_malformed_digest_is_a_mismatch(hasher, digest):
    assert hasher.verify("pw", digest) is False


def test_password_of_exactly_72_bytes(hasher):
    password = "a" * MAX_PASSWORD_BYTES
    digest = hasher.hash(password)
    assert hasher.verify(password, digest) is True
    assert hasher.verify("a" * (MAX_PASSWORD_BYTES - 1), digest) is False


@pytest.mark.parametrize("password", ["a" * 73, "é" * 72], ids=["73-ascii-bytes", "72-multibyte-chars"])
def test_password_over_72_bytes_is_rejected(hasher, password):
    with pytest.raises(InvalidPasswordError) as exc_info:
        hasher.hash(password)
    assert exc_info.value.status_code == 422


def test_verify_password_over_72_bytes_is_a_mismatch(hasher):
    digest = hasher.hash("a" * MAX_PASSWORD_BYTES)
    assert hasher.verify("a" * MAX_PASSWORD_BYTES + "b", digest) is False
