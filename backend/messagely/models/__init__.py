from .user import UserSummary, RegisteredUser, UserDetail
from .message import Message, OutboundMessage, InboundMessage, MessageDetail

__all__ = [
    "UserSummary",
    "RegisteredUser",
    "UserDetail",
    "Message",
    "OutboundMessage",
    "InboundMessage",
    "MessageDetail"
]
