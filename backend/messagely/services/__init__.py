from .password_hasher import PasswordHasher
from .user_directory import UserDirectory, get_user_directory
from .message_ledger import MessageLedger, get_message_ledger
from .session_issuer import SessionIssuer, get_session_issuer
from .background_tasks import BackgroundTaskManager, get_background_manager

__all__ = [
    "PasswordHasher",
    "UserDirectory",
    "get_user_directory",
    "MessageLedger",
    "get_message_ledger",
    "SessionIssuer",
    "get_session_issuer",
    "BackgroundTaskManager",
    "get_background_manager"
]
