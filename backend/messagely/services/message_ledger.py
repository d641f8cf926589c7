import logging
from typing import List

from messagely.core.exceptions import NotFoundError
from messagely.db.repositories import MessageRepository, UserRepository
from messagely.models import InboundMessage, Message, MessageDetail, OutboundMessage
from messagely.models.base import utcnow

logger = logging.getLogger(__name__)


class MessageLedger:
    """Read side of the message store, plus appending new messages"""

    async def _ensure_user_exists(self, username: str):
        # An unknown user would only yield an empty thread; report it instead.
        if not await UserRepository.exists(username):
            raise NotFoundError(f"The user with the username '{username}' does not exist!")

    async def messages_from(self, username: str) -> List[OutboundMessage]:
        """Messages sent by this user, each with its recipient attached"""
        await self._ensure_user_exists(username)
        rows = await MessageRepository.list_from(username)
        return [OutboundMessage.from_row(row) for row in rows]

    async def messages_to(self, username: str) -> List[InboundMessage]:
        """Messages received by this user, each with its sender attached"""
        await self._ensure_user_exists(username)
        rows = await MessageRepository.list_to(username)
        return [InboundMessage.from_row(row) for row in rows]

    async def send(self, from_username: str, to_username: str, body: str) -> Message:
        """Append a message from one registered user to another"""
        row = await MessageRepository.create(from_username, to_username, body, utcnow())
        logger.info(f"Message {row['id']} sent from '{from_username}' to '{to_username}'")
        return Message.from_dict(row)

    async def get(self, message_id: int) -> MessageDetail:
        """Get one message with both parties attached"""
        row = await MessageRepository.get_by_id(message_id)
        if not row:
            raise NotFoundError(f"No message with id {message_id}")
        return MessageDetail.from_row(row)


# Singleton instance
_message_ledger = None

def get_message_ledger() -> MessageLedger:
    """Get singleton MessageLedger instance"""
    global _message_ledger
    if _message_ledger is None:
        _message_ledger = MessageLedger()
    return _message_ledger
