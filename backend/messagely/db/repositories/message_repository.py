from datetime import datetime
from typing import Optional, List, Dict, Any

import aiosqlite

from messagely.core.exceptions import NotFoundError
from messagely.db.database import get_db
from messagely.models.base import format_timestamp


class MessageRepository:
    """Repository for message database operations"""

    @staticmethod
    async def create(from_username: str, to_username: str, body: str, sent_at: datetime) -> Dict[str, Any]:
        """Append a message; both parties must already be registered"""
        db = get_db()
        try:
            cursor = await db.execute(
                """INSERT INTO messages (from_username, to_username, body, sent_at)
                   VALUES (?, ?, ?, ?)""",
                (from_username, to_username, body, format_timestamp(sent_at))
            )
        except aiosqlite.IntegrityError as e:
            if "FOREIGN KEY" in str(e):
                raise NotFoundError(
                    f"Cannot send a message from '{from_username}' to '{to_username}': unknown user"
                )
            raise
        await db.commit()

        return {
            "id": cursor.lastrowid,
            "from_username": from_username,
            "to_username": to_username,
            "body": body,
            "sent_at": format_timestamp(sent_at),
            "read_at": None,
        }

    @staticmethod
    async def get_by_id(message_id: int) -> Optional[Dict[str, Any]]:
        """Get one message joined with both parties"""
        db = get_db()
        return await db.fetch_one(
            """SELECT m.id, m.body, m.sent_at, m.read_at,
                      f.username AS from_username, f.first_name AS from_first_name,
                      f.last_name AS from_last_name, f.phone AS from_phone,
                      t.username AS to_username, t.first_name AS to_first_name,
                      t.last_name AS to_last_name, t.phone AS to_phone
               FROM messages m
               JOIN users f ON m.from_username = f.username
               JOIN users t ON m.to_username = t.username
               WHERE m.id = ?""",
            (message_id,)
        )

    @staticmethod
    async def list_from(username: str) -> List[Dict[str, Any]]:
        """Messages sent by a user, joined with the recipient"""
        db = get_db()
        return await db.fetch_all(
            """SELECT m.id, u.username, u.first_name, u.last_name, u.phone,
                      m.body, m.sent_at, m.read_at
               FROM messages m
               JOIN users u ON m.to_username = u.username
               WHERE m.from_username = ?
               ORDER BY m.sent_at, m.id""",
            (username,)
        )

    @staticmethod
    async def list_to(username: str) -> List[Dict[str, Any]]:
        """Messages received by a user, joined with the sender"""
        db = get_db()
        return await db.fetch_all(
            """SELECT m.id, u.username, u.first_name, u.last_name, u.phone,
                      m.body, m.sent_at, m.read_at
               FROM messages m
               JOIN users u ON m.from_username = u.username
               WHERE m.to_username = ?
               ORDER BY m.sent_at, m.id""",
            (username,)
        )
