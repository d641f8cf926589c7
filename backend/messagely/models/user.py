from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .base import RecordMixin, parse_timestamp


@dataclass
class UserSummary(RecordMixin):
    """Public identity of a user, used in listings and as message counterpart"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict):
        """Create from a row that carries at least the public user columns"""
        return cls(
            username=data["username"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            phone=data.get("phone"),
        )


@dataclass
class RegisteredUser(RecordMixin):
    """
    Result of a registration.

    Carries the stored password hash. It is meant for internal callers only;
    anything facing clients must drop the password field.
    """
    username: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            username=data["username"],
            password=data["password"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            phone=data.get("phone"),
        )


@dataclass
class UserDetail(RecordMixin):
    """Full public view of one user"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    join_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            username=data["username"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            phone=data.get("phone"),
            join_at=parse_timestamp(data.get("join_at")),
            last_login_at=parse_timestamp(data.get("last_login_at")),
        )
