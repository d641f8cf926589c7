"""Tests for schema creation and migrations."""

import sqlite3

import pytest

from messagely.db.database import init_db
from messagely.db.migrations import MIGRATIONS, apply_migration, get_current_version


@pytest.mark.asyncio
async def test_init_db_applies_all_migrations(database):
    assert await get_current_version(database) == MIGRATIONS[-1][0]


@pytest.mark.asyncio
async def test_init_db_is_idempotent(database):
    await init_db()
    rows = await database.fetch_all("SELECT version FROM schema_version ORDER BY version")
    assert [row["version"] for row in rows] == [m[0] for m in MIGRATIONS]


@pytest.mark.asyncio
async def test_foreign_keys_are_enforced(database):
    row = await database.fetch_one("PRAGMA foreign_keys")
    assert row["foreign_keys"] == 1


@pytest.mark.asyncio
async def test_migration_skips_objects_that_already_exist(database):
    await apply_migration(
        database, 90, "Recreate existing index and table",
        """CREATE INDEX idx_messages_from ON messages(from_username);
CREATE TABLE users (username TEXT PRIMARY KEY)"""
    )

    row = await database.fetch_one("SELECT description FROM schema_version WHERE version = 90")
    assert row["description"] == "Recreate existing index and table"


@pytest.mark.asyncio
async def test_migration_failure_propagates(database):
    with pytest.raises(sqlite3.OperationalError):
        await apply_migration(database, 91, "Broken", "ALTER TABLE nowhere ADD COLUMN x TEXT")

    assert await database.fetch_one("SELECT version FROM schema_version WHERE version = 91") is None
