"""Tests for registration, authentication and login bookkeeping."""

import asyncio
import threading

import pytest

from messagely.core.exceptions import ConflictError, InvalidPasswordError, NotFoundError
from messagely.models import RegisteredUser
from messagely.models.base import utcnow
from tests.conftest import ALICE, BOB


@pytest.mark.asyncio
async def test_register_returns_fields_and_hash(database, directory):
    user = await directory.register(ALICE)

    assert user.username == "alice"
    assert user.first_name == "Alice"
    assert user.last_name == "Liddell"
    assert user.phone == "+15550001"
    assert user.password != "secret1"
    assert directory.hasher.verify("secret1", user.password)
    assert not hasattr(user, "join_at")


@pytest.mark.asyncio
async def test_register_then_get_matches_input(database, directory):
    before = utcnow()
    await directory.register(ALICE)

    user = await directory.get("alice")
    assert (user.username, user.first_name, user.last_name, user.phone) == (
        "alice", "Alice", "Liddell", "+15550001"
    )
    assert user.join_at >= before
    assert user.last_login_at is None


@pytest.mark.asyncio
async def test_duplicate_username_conflicts(database, directory):
    await directory.register(ALICE)

    with pytest.raises(ConflictError) as exc_info:
        await directory.register({**ALICE, "password": "other", "first_name": "Impostor"})
    assert exc_info.value.status_code == 409

    user = await directory.get("alice")
    assert user.first_name == "Alice"
    assert await directory.authenticate("alice", "secret1") is True
    assert await directory.authenticate("alice", "other") is False


@pytest.mark.asyncio
async def test_concurrent_duplicate_registration_has_one_winner(database, directory):
    results = await asyncio.gather(
        directory.register(ALICE),
        directory.register({**ALICE, "first_name": "Other"}),
        return_exceptions=True,
    )

    winners = [r for r in results if isinstance(r, RegisteredUser)]
    conflicts = [r for r in results if isinstance(r, ConflictError)]
    assert len(winners) == 1
    assert len(conflicts) == 1
    assert (await directory.get("alice")).first_name == winners[0].first_name


@pytest.mark.asyncio
async def test_authenticate(database, directory):
    await directory.register(ALICE)

    assert await directory.authenticate("alice", "secret1") is True
    assert await directory.authenticate("alice", "wrong") is False


@pytest.mark.asyncio
async def test_authenticate_unknown_user_is_false(database, directory):
    assert await directory.authenticate("nobody", "anything") is False


@pytest.mark.asyncio
async def test_update_login_timestamp(database, directory):
    await directory.register(ALICE)
    before = utcnow()

    stamped = await directory.update_login_timestamp("alice")

    assert stamped >= before
    assert (await directory.get("alice")).last_login_at == stamped


@pytest.mark.asyncio
async def test_update_login_timestamp_unknown_user(database, directory):
    with pytest.raises(NotFoundError):
        await directory.update_login_timestamp("nobody")


@pytest.mark.asyncio
async def test_all_lists_public_fields(database, directory):
    await directory.register(ALICE)
    await directory.register(BOB)

    users = await directory.all()

    assert sorted(u.username for u in users) == ["alice", "bob"]
    for user in users:
        assert set(user.to_dict()) == {"username", "first_name", "last_name", "phone"}


@pytest.mark.asyncio
async def test_all_on_empty_directory(database, directory):
    assert await directory.all() == []


@pytest.mark.asyncio
async def test_get_unknown_user(database, directory):
    with pytest.raises(NotFoundError) as exc_info:
        await directory.get("nobody")
    assert "nobody" in exc_info.value.message


@pytest.mark.asyncio
async def test_register_rejects_password_over_72_bytes(database, directory):
    with pytest.raises(InvalidPasswordError):
        await directory.register({**ALICE, "password": "é" * 72})

    with pytest.raises(NotFoundError):
        await directory.get("alice")


@pytest.mark.asyncio
async def test_hashing_runs_off_the_event_loop_thread(database, directory, monkeypatch):
    threads = []
    original_hash = directory.hasher.hash
    original_verify = directory.hasher.verify

    def recording_hash(password):
        threads.append(threading.get_ident())
        return original_hash(password)

    def recording_verify(password, hashed):
        threads.append(threading.get_ident())
        return original_verify(password, hashed)

    monkeypatch.setattr(directory.hasher, "hash", recording_hash)
    monkeypatch.setattr(directory.hasher, "verify", recording_verify)

    await directory.register(ALICE)
    assert await directory.authenticate("alice", "secret1") is True

    assert len(threads) == 2
    assert threading.get_ident() not in threads
