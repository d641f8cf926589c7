from datetime import datetime
from typing import Optional, List, Dict, Any

import aiosqlite

from messagely.core.exceptions import ConflictError
from messagely.db.database import get_db
from messagely.models.base import format_timestamp


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    async def create(
        username: str,
        password_hash: str,
        first_name: Optional[str],
        last_name: Optional[str],
        phone: Optional[str],
        join_at: datetime
    ) -> Dict[str, Any]:
        """Insert a user; the primary key decides duplicate usernames"""
        db = get_db()
        try:
            await db.execute(
                """INSERT INTO users (username, password, first_name, last_name, phone, join_at)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (username, password_hash, first_name, last_name, phone, format_timestamp(join_at))
            )
        except aiosqlite.IntegrityError as e:
            if "users.username" in str(e):
                raise ConflictError(f"The username '{username}' is already taken")
            raise
        await db.commit()

        return {
            "username": username,
            "password": password_hash,
            "first_name": first_name,
            "last_name": last_name,
            "phone": phone,
        }

    @staticmethod
    async def get_password_hash(username: str) -> Optional[str]:
        """Get the stored password hash, or None for an unknown user"""
        db = get_db()
        row = await db.fetch_one(
            "SELECT password FROM users WHERE username = ?", (username,)
        )
        return row["password"] if row else None

    @staticmethod
    async def update_last_login(username: str, timestamp: datetime) -> int:
        """Stamp last_login_at and return the number of rows touched"""
        db = get_db()
        cursor = await db.execute(
            "UPDATE users SET last_login_at = ? WHERE username = ?",
            (format_timestamp(timestamp), username)
        )
        await db.commit()
        return cursor.rowcount

    @staticmethod
    async def list_all() -> List[Dict[str, Any]]:
        """Public columns of every user, in storage order"""
        db = get_db()
        return await db.fetch_all(
            "SELECT username, first_name, last_name, phone FROM users"
        )

    @staticmethod
    async def get_by_username(username: str) -> Optional[Dict[str, Any]]:
        """Get the public columns of one user"""
        db = get_db()
        return await db.fetch_one(
            """SELECT username, first_name, last_name, phone, join_at, last_login_at
               FROM users WHERE username = ?""",
            (username,)
        )

    @staticmethod
    async def exists(username: str) -> bool:
        """Check whether a username is registered"""
        db = get_db()
        row = await db.fetch_one(
            "SELECT username FROM users WHERE username = ?", (username,)
        )
        return row is not None
