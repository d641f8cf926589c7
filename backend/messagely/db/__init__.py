from .database import db, get_db, init_db
from .repositories import UserRepository, MessageRepository

__all__ = [
    "db",
    "get_db",
    "init_db",
    "UserRepository",
    "MessageRepository"
]
