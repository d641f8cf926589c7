"""Shared fixtures: a throwaway SQLite file per test and cheap bcrypt."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from messagely.core.config import Settings, get_settings
from messagely.db.database import get_db, init_db
from messagely.main import app
from messagely.services.background_tasks import BackgroundTaskManager
from messagely.services.message_ledger import MessageLedger, get_message_ledger
from messagely.services.session_issuer import SessionIssuer, get_session_issuer
from messagely.services.user_directory import UserDirectory, get_user_directory


ALICE = {
    "username": "alice",
    "password": "secret1",
    "first_name": "Alice",
    "last_name": "Liddell",
    "phone": "+15550001",
}

BOB = {
    "username": "bob",
    "password": "secret2",
    "first_name": "Bob",
    "last_name": "Builder",
    "phone": "+15550002",
}

CAROL = {
    "username": "carol",
    "password": "secret3",
    "first_name": "Carol",
    "last_name": "Danvers",
    "phone": "+15550003",
}


@pytest.fixture
def test_settings():
    return Settings(BCRYPT_WORK_FACTOR=4, SECRET_KEY="test-secret", LOG_LEVEL="DEBUG")


@pytest_asyncio.fixture
async def database(tmp_path):
    db = get_db()
    await db.set_db_path(str(tmp_path / "messagely.db"))
    await init_db()
    yield db
    await db.disconnect()


@pytest.fixture
def directory(test_settings):
    return UserDirectory(test_settings)


@pytest.fixture
def ledger():
    return MessageLedger()


@pytest.fixture
def task_manager():
    return BackgroundTaskManager()


@pytest.fixture
def issuer(test_settings, directory, task_manager):
    return SessionIssuer(test_settings, directory=directory, task_manager=task_manager)


@pytest.fixture
def client(tmp_path, test_settings):
    get_db().db_path = str(tmp_path / "api.db")
    directory = UserDirectory(test_settings)
    ledger = MessageLedger()
    issuer = SessionIssuer(test_settings, directory=directory)

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_user_directory] = lambda: directory
    app.dependency_overrides[get_message_ledger] = lambda: ledger
    app.dependency_overrides[get_session_issuer] = lambda: issuer

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
