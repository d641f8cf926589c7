import logging
from typing import Any, Dict, Optional

from messagely.core.config import Settings, settings as default_settings
from messagely.core.exceptions import AuthenticationError

from .background_tasks import BackgroundTaskManager, get_background_manager
from .token_service import sign_token
from .user_directory import UserDirectory, get_user_directory

logger = logging.getLogger(__name__)


class SessionIssuer:
    """Turns verified credentials into signed bearer tokens"""

    def __init__(
        self,
        settings: Settings,
        directory: Optional[UserDirectory] = None,
        task_manager: Optional[BackgroundTaskManager] = None
    ):
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.directory = directory or UserDirectory(settings)
        self.task_manager = task_manager or get_background_manager()

    def issue_token(self, username: str) -> str:
        """Sign a token whose only claim is the username"""
        return sign_token({"username": username}, self.secret_key, self.algorithm)

    async def login(self, username: str, password: str) -> str:
        """Authenticate, stamp the login time, then issue a token"""
        if not await self.directory.authenticate(username, password):
            logger.warning(f"Failed login for '{username}'")
            raise AuthenticationError("Invalid username/password")

        await self.directory.update_login_timestamp(username)
        logger.info(f"User '{username}' logged in")
        return self.issue_token(username)

    async def register_and_issue(self, fields: Dict[str, Any]) -> str:
        """
        Register a user and hand back a token right away.

        The login stamp runs detached: its failure is logged by the task
        manager and never reaches the caller, so a new user may end up with
        no last_login_at.
        """
        user = await self.directory.register(fields)
        token = self.issue_token(user.username)
        self.task_manager.spawn(
            self.directory.update_login_timestamp(user.username),
            name=f"login-stamp:{user.username}"
        )
        return token


# Singleton instance
_session_issuer = None

def get_session_issuer() -> SessionIssuer:
    """Get singleton SessionIssuer instance"""
    global _session_issuer
    if _session_issuer is None:
        _session_issuer = SessionIssuer(default_settings, directory=get_user_directory())
    return _session_issuer
