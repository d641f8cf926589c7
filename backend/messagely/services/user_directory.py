import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from messagely.core.config import Settings, settings as default_settings
from messagely.core.exceptions import NotFoundError
from messagely.db.repositories import UserRepository
from messagely.models import RegisteredUser, UserDetail, UserSummary
from messagely.models.base import utcnow

from .password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserDirectory:
    """Registered users: creation, credential checks and login bookkeeping"""

    def __init__(self, settings: Settings, hasher: Optional[PasswordHasher] = None):
        self.hasher = hasher or PasswordHasher(settings)

    async def register(self, fields: Dict[str, Any]) -> RegisteredUser:
        """
        Register a new user.

        Returns the stored record including the password hash and without the
        join/login timestamps. Raises ConflictError for a taken username.
        """
        username = fields["username"]
        # bcrypt is CPU bound; keep it off the event loop
        loop = asyncio.get_event_loop()
        password_hash = await loop.run_in_executor(None, self.hasher.hash, fields["password"])

        row = await UserRepository.create(
            username=username,
            password_hash=password_hash,
            first_name=fields.get("first_name"),
            last_name=fields.get("last_name"),
            phone=fields.get("phone"),
            join_at=utcnow()
        )
        logger.info(f"Registered user '{username}'")
        return RegisteredUser.from_dict(row)

    async def authenticate(self, username: str, password: str) -> bool:
        """Is this username/password valid? An unknown user is just False."""
        password_hash = await UserRepository.get_password_hash(username)
        if password_hash is None:
            return False
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.hasher.verify, password, password_hash)

    async def update_login_timestamp(self, username: str) -> datetime:
        """Set last_login_at to now and return it"""
        timestamp = utcnow()
        updated = await UserRepository.update_last_login(username, timestamp)
        if updated == 0:
            raise NotFoundError(f"The user with the username '{username}' does not exist!")
        return timestamp

    async def all(self) -> List[UserSummary]:
        """Basic info on all users"""
        rows = await UserRepository.list_all()
        return [UserSummary.from_dict(row) for row in rows]

    async def get(self, username: str) -> UserDetail:
        """Get user by username"""
        row = await UserRepository.get_by_username(username)
        if not row:
            raise NotFoundError(f"The user with the username '{username}' does not exist!")
        return UserDetail.from_dict(row)


# Singleton instance
_user_directory = None

def get_user_directory() -> UserDirectory:
    """Get singleton UserDirectory instance"""
    global _user_directory
    if _user_directory is None:
        _user_directory = UserDirectory(default_settings)
    return _user_directory
