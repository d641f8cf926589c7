import logging
from typing import Optional

import aiosqlite

from messagely.core.config import settings
from messagely.db.schema import ALL_TABLES, INDEXES
from messagely.db.migrations import run_migrations as run_db_migrations

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.DATABASE_URL.replace("sqlite+aiosqlite:///", "")
        self._connection: Optional[aiosqlite.Connection] = None
        self._current_path: Optional[str] = None

    async def set_db_path(self, new_path: str):
        """Switch to a different database path"""
        if self.db_path != new_path:
            self.db_path = new_path
            if self._connection:
                await self.disconnect()
            self._current_path = None

    async def connect(self):
        """Create database connection"""
        # If we have a connection but path changed, close it first
        if self._connection and self._current_path != self.db_path:
            await self.disconnect()

        if not self._connection:
            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
            await self._connection.execute("PRAGMA foreign_keys = ON")
            self._current_path = self.db_path
            logger.info(f"Connected to database at {self.db_path}")

    async def disconnect(self):
        """Close database connection"""
        if self._connection:
            await self._connection.close()
            self._connection = None
            self._current_path = None

    async def execute(self, query: str, params: tuple = ()):
        """Execute a query"""
        if not self._connection or self._current_path != self.db_path:
            await self.connect()
        return await self._connection.execute(query, params)

    async def fetch_one(self, query: str, params: tuple = ()):
        """Fetch one row"""
        cursor = await self.execute(query, params)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def fetch_all(self, query: str, params: tuple = ()):
        """Fetch all rows"""
        cursor = await self.execute(query, params)
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def commit(self):
        """Commit transaction"""
        if self._connection:
            await self._connection.commit()


# Global database instance
db = Database()


def get_db() -> Database:
    """Get the current database instance - use this for all database operations"""
    return db


async def create_tables():
    """Create all database tables"""
    for table_sql in ALL_TABLES:
        await db.execute(table_sql)

    for index_sql in INDEXES:
        await db.execute(index_sql)

    await db.commit()


async def init_db():
    """Initialize database with schema and pending migrations"""
    await db.connect()
    await create_tables()
    version = await run_db_migrations(db)
    logger.info(f"Database initialized at schema version {version}")
