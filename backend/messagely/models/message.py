from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .base import RecordMixin, parse_timestamp
from .user import UserSummary


def _counterpart(row: dict, prefix: str = "") -> UserSummary:
    return UserSummary(
        username=row[f"{prefix}username"],
        first_name=row.get(f"{prefix}first_name"),
        last_name=row.get(f"{prefix}last_name"),
        phone=row.get(f"{prefix}phone"),
    )


@dataclass
class Message(RecordMixin):
    """A stored message as written to the ledger"""
    id: int
    from_username: str
    to_username: str
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            id=data["id"],
            from_username=data["from_username"],
            to_username=data["to_username"],
            body=data.get("body"),
            sent_at=parse_timestamp(data["sent_at"]),
            read_at=parse_timestamp(data.get("read_at")),
        )


@dataclass
class OutboundMessage(RecordMixin):
    """A message in a sender's thread, with the recipient attached"""
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime]
    to_user: UserSummary

    @classmethod
    def from_row(cls, row: dict):
        return cls(
            id=row["id"],
            body=row.get("body"),
            sent_at=parse_timestamp(row["sent_at"]),
            read_at=parse_timestamp(row.get("read_at")),
            to_user=_counterpart(row),
        )


@dataclass
class InboundMessage(RecordMixin):
    """A message in a recipient's thread, with the sender attached"""
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime]
    from_user: UserSummary

    @classmethod
    def from_row(cls, row: dict):
        return cls(
            id=row["id"],
            body=row.get("body"),
            sent_at=parse_timestamp(row["sent_at"]),
            read_at=parse_timestamp(row.get("read_at")),
            from_user=_counterpart(row),
        )


@dataclass
class MessageDetail(RecordMixin):
    """A single message with both parties attached"""
    id: int
    body: Optional[str]
    sent_at: datetime
    read_at: Optional[datetime]
    from_user: UserSummary
    to_user: UserSummary

    @classmethod
    def from_row(cls, row: dict):
        """Build from a row whose user columns are prefixed with from_ and to_"""
        return cls(
            id=row["id"],
            body=row.get("body"),
            sent_at=parse_timestamp(row["sent_at"]),
            read_at=parse_timestamp(row.get("read_at")),
            from_user=_counterpart(row, "from_"),
            to_user=_counterpart(row, "to_"),
        )
