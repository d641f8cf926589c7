"""Database migration system"""
import logging
import re
from datetime import datetime, timezone
from typing import List, Tuple

logger = logging.getLogger(__name__)


# Migration format: (version, description, up_sql, down_sql)
MIGRATIONS: List[Tuple[int, str, str, str]] = [
    (
        1,
        "Initial schema",
        """-- This migration is handled by schema.py create_tables()""",
        """-- Rollback not supported for initial schema"""
    ),
    (
        2,
        "Index messages by sent_at for ordered threads",
        """CREATE INDEX IF NOT EXISTS idx_messages_sent_at ON messages(sent_at)""",
        """DROP INDEX IF EXISTS idx_messages_sent_at"""
    ),
]

# SQLite reports these as "table <name> already exists" and "index <name> already exists"
_ALREADY_APPLIED_ERRORS = re.compile(r"\b(table|index) \S+ already exists")


async def get_current_version(db) -> int:
    """Get current schema version"""
    result = await db.fetch_one(
        "SELECT MAX(version) as version FROM schema_version"
    )
    return result["version"] if result and result["version"] else 0


async def apply_migration(db, version: int, description: str, up_sql: str):
    """Apply a single migration"""
    statements = [stmt.strip() for stmt in up_sql.split(';') if stmt.strip()]
    for statement in statements:
        if statement.startswith('--'):
            continue
        try:
            await db.execute(statement)
        except Exception as e:
            error_msg = str(e).lower()
            if _ALREADY_APPLIED_ERRORS.search(error_msg):
                logger.info(f"Migration {version}: skipping statement (already exists): {statement}")
                continue
            logger.error(f"Migration {version} failed on statement: {statement}: {e}")
            raise

    await db.execute(
        "INSERT INTO schema_version (version, applied_at, description) VALUES (?, ?, ?)",
        (version, datetime.now(timezone.utc).isoformat(), description)
    )
    await db.commit()
    logger.info(f"Applied migration {version}: {description}")


async def run_migrations(db) -> int:
    """Run all pending migrations, returning the resulting schema version"""
    current_version = await get_current_version(db)

    for version, description, up_sql, _ in MIGRATIONS:
        if version > current_version:
            await apply_migration(db, version, description, up_sql)

    final_version = await get_current_version(db)
    if final_version > current_version:
        logger.info(f"Database migrated from version {current_version} to {final_version}")
    return final_version
