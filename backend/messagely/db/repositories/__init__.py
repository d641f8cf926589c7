from .user_repository import UserRepository
from .message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "MessageRepository"
]
